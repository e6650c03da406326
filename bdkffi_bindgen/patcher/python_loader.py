"""Rewrite the native library loader of the generated Python binding.

The generator emits a `loadIndirect()` that opens the native library by its
exact filename. Built libraries usually carry a platform or version suffix
(`libbdkffi.so`, `bdkffi.dylib`, `bdkffi.cpython-311-x86_64-linux-gnu.so`), so
the header of that function is replaced with a new `loadIndirect()` that globs
the binding's own directory for `<lib_name>.*` and loads the first match. The
original function body is kept, renamed to `_loadIndirectOld()`.

The patch applies once. The marker disappears after the first run, so a
second run raises AnchorNotFoundError instead of stacking replacements.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from bdkffi_bindgen.patcher.types import (
    LOAD_INDIRECT_MARKER,
    AnchorNotFoundError,
    AnchorSpan,
    BindingDecodeError,
    PatchResult,
    PatchTarget,
)

logger = logging.getLogger(__name__)

# The new header takes a defaulted argument so the marker itself does not
# reappear in the output.
_LOADER_TEMPLATE = """
def loadIndirect(pattern={pattern}):
    import glob
    return getattr(ctypes.cdll, glob.glob(os.path.join(os.path.dirname(os.path.abspath(__file__)), pattern))[0])

def _loadIndirectOld():"""


def find_anchor(text: str, path: Path, marker: str = LOAD_INDIRECT_MARKER) -> AnchorSpan:
    """Return the span of the first literal occurrence of marker in text.

    Raises AnchorNotFoundError naming path when the marker is absent.
    """
    start = text.find(marker)
    if start < 0:
        raise AnchorNotFoundError(path, marker)
    return AnchorSpan(start=start, end=start + len(marker))


def render_loader_replacement(lib_name: str) -> str:
    """Return the code that replaces the loader marker.

    The glob pattern is rendered as a Python string literal so that any
    lib_name produces valid source.
    """
    return _LOADER_TEMPLATE.format(pattern=repr(f"{lib_name}.*"))


def apply_loader_patch(text: str, span: AnchorSpan, lib_name: str) -> str:
    """Splice the glob-based loader over span and return the new text."""
    return text[: span.start] + render_loader_replacement(lib_name) + text[span.end :]


def patch_python_binding(target: PatchTarget) -> PatchResult:
    """Patch the loader in target.path in place.

    The file is only written after the marker has been found, and the write
    replaces the whole file at once.
    """
    path = target.path
    # newline="" keeps the generator's line endings byte-for-byte
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise BindingDecodeError(path, str(exc)) from exc

    span = find_anchor(text, path)
    patched = apply_loader_patch(text, span, target.lib_name)

    _write_text_atomic(path, patched)
    logger.info("Patched loadIndirect in %s to glob for %s.*", path, target.lib_name)
    return PatchResult(path=path, span=span, lib_name=target.lib_name)


def fixup_python_lib_path(out_dir: Path, lib_name: str) -> PatchResult:
    """Patch the generated `bdk.py` in out_dir to find lib_name by glob."""
    return patch_python_binding(PatchTarget(out_dir=Path(out_dir), lib_name=str(lib_name)))


def _write_text_atomic(path: Path, text: str) -> None:
    """Replace path with text via a temp file in the same directory."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

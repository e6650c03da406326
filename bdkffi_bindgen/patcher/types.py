"""Types for the generated-binding patcher."""

from dataclasses import dataclass
from pathlib import Path

from bdkffi_bindgen.errors import BindgenError

# Generated Python binding that holds the native library loader
PYTHON_BINDING_FILENAME = "bdk.py"

# Header of the loader function the generator emits
LOAD_INDIRECT_MARKER = "def loadIndirect():"


@dataclass(frozen=True)
class PatchTarget:
    """The generated file to patch and the library name to glob for.

    lib_name is copied into the replacement loader as-is; it is not checked
    against the filesystem.
    """

    out_dir: Path
    lib_name: str
    filename: str = PYTHON_BINDING_FILENAME

    @property
    def path(self) -> Path:
        return Path(self.out_dir) / self.filename


@dataclass(frozen=True)
class AnchorSpan:
    """Half-open [start, end) range of the marker within the file text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class PatchResult:
    path: Path
    span: AnchorSpan
    lib_name: str

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "span": [self.span.start, self.span.end],
            "lib_name": self.lib_name,
        }


class AnchorNotFoundError(BindgenError):
    """Raised when the loader marker is missing from the file being patched.

    Also raised when the file was already patched, since patching removes
    the marker.
    """

    def __init__(self, path: Path, marker: str = LOAD_INDIRECT_MARKER):
        self.path = path
        self.marker = marker
        super().__init__(f"{marker!r} not found in `{path}`")


class BindingDecodeError(BindgenError):
    """Raised when the file being patched is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        message = f"`{path}` is not valid UTF-8 text"
        super().__init__(f"{message}: {reason}" if reason else message)

"""Post-generation patching of the Python binding.

Public API:
    fixup_python_lib_path(out_dir, lib_name) -> PatchResult
"""

from bdkffi_bindgen.patcher.python_loader import (
    find_anchor,
    fixup_python_lib_path,
    patch_python_binding,
    render_loader_replacement,
)
from bdkffi_bindgen.patcher.types import (
    LOAD_INDIRECT_MARKER,
    PYTHON_BINDING_FILENAME,
    AnchorNotFoundError,
    AnchorSpan,
    BindingDecodeError,
    PatchResult,
    PatchTarget,
)

__all__ = [
    "find_anchor",
    "fixup_python_lib_path",
    "patch_python_binding",
    "render_loader_replacement",
    "LOAD_INDIRECT_MARKER",
    "PYTHON_BINDING_FILENAME",
    "AnchorNotFoundError",
    "AnchorSpan",
    "BindingDecodeError",
    "PatchResult",
    "PatchTarget",
]

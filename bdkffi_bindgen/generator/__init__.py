"""Generation dispatch around the external uniffi-bindgen generator.

Public API:
    generate_bindings(udl_file, language, out_dir) -> GenerationRequest
"""

from bdkffi_bindgen.generator.dispatch import (
    build_request,
    generate_bindings,
)
from bdkffi_bindgen.generator.types import GenerationError, GenerationRequest

__all__ = [
    "build_request",
    "generate_bindings",
    "GenerationError",
    "GenerationRequest",
]

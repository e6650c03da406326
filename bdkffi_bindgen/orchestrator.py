"""Bindgen orchestrator: generate bindings, then patch the Python loader.

Flow:
1. Generate bindings for the one requested language.
2. If the language is Python and a library name was given, rewrite the
   loader in the generated `bdk.py`.

Every step is fail-fast: the first error propagates and nothing after it
runs. A Python run without a library name skips step 2; any other language
never reaches it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bdkffi_bindgen.core.config import BindgenSettings
from bdkffi_bindgen.generator import GenerationRequest, generate_bindings
from bdkffi_bindgen.language import Language, parse_language
from bdkffi_bindgen.patcher import PatchResult, fixup_python_lib_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BindgenOptions:
    """Resolved inputs for one invocation. language is already validated."""

    udl_file: Path
    language: Language
    out_dir: Path
    python_fixup_path: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: BindgenSettings) -> "BindgenOptions":
        """Build options from merged settings.

        Raises UnsupportedLanguageError for an unknown language and
        ValueError when language or output_dir is missing.
        """
        if settings.language is None:
            raise ValueError("language is required")
        if settings.output_dir is None:
            raise ValueError("output directory is required")
        return cls(
            udl_file=settings.udl,
            language=parse_language(settings.language),
            out_dir=settings.output_dir,
            python_fixup_path=settings.python_fixup_path,
        )


@dataclass
class BindgenResult:
    request: GenerationRequest
    patch: Optional[PatchResult] = None

    @property
    def patched(self) -> bool:
        return self.patch is not None

    def to_dict(self) -> dict:
        return {
            "request": self.request.to_dict(),
            "patch": self.patch.to_dict() if self.patch else None,
        }


def should_patch(options: BindgenOptions) -> bool:
    return options.language is Language.PYTHON and bool(options.python_fixup_path)


def run_bindgen(options: BindgenOptions, settings: Optional[BindgenSettings] = None) -> BindgenResult:
    """Run generation and, when it applies, the Python loader fixup."""
    settings = settings or BindgenSettings()

    logger.info("Input UDL file is %s", options.udl_file)
    logger.info("Chosen language is %s", options.language)
    logger.info("Output directory is %s", options.out_dir)

    request = generate_bindings(
        options.udl_file,
        options.language,
        options.out_dir,
        executable=settings.uniffi_bindgen,
        timeout=settings.generator_timeout,
    )
    result = BindgenResult(request=request)

    if should_patch(options):
        logger.info("Fixing up python lib path, %s", options.python_fixup_path)
        result.patch = fixup_python_lib_path(options.out_dir, options.python_fixup_path)
    elif options.language is Language.PYTHON:
        logger.debug("No python fixup path given; leaving loader unpatched")

    return result

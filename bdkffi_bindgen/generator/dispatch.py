"""Run the external `uniffi-bindgen` generator for a single target language.

The generator is a black box: this module only builds its argument vector,
runs it as a subprocess, and turns a failed run into a GenerationError that
carries the generator's own output. Nothing here interprets or classifies
generator failures.
"""

import logging
import shlex
import subprocess
from pathlib import Path

from bdkffi_bindgen.generator.types import GenerationError, GenerationRequest
from bdkffi_bindgen.language import Language

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "uniffi-bindgen"

# Default timeout for one generator run (seconds)
DEFAULT_TIMEOUT = 300

_EXIT_SUCCESS = 0


def build_request(udl_file: Path, language: Language, out_dir: Path) -> GenerationRequest:
    """Build the request for one language, with no config override and no formatting."""
    return GenerationRequest(
        udl_file=Path(udl_file),
        languages=[str(language)],
        out_dir=Path(out_dir),
        config_file=None,
        try_format_code=False,
    )


def generate_bindings(
    udl_file: Path,
    language: Language,
    out_dir: Path,
    *,
    executable: str = DEFAULT_EXECUTABLE,
    timeout: int = DEFAULT_TIMEOUT,
) -> GenerationRequest:
    """Generate bindings for udl_file in language, writing into out_dir.

    Returns the request that was run. Raises GenerationError if the generator
    cannot be started, times out, or exits non-zero.
    """
    request = build_request(udl_file, language, out_dir)
    run_generator(request, executable=executable, timeout=timeout)
    return request


def run_generator(
    request: GenerationRequest,
    *,
    executable: str = DEFAULT_EXECUTABLE,
    timeout: int = DEFAULT_TIMEOUT,
) -> None:
    """Run the generator for a prepared request."""
    cmd = shlex.split(executable) + request.to_args()
    logger.info("Running generator: %s", shlex.join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GenerationError(
            f"generator executable not found: {executable!r}; "
            "install uniffi-bindgen or set BDKFFI_BINDGEN_UNIFFI_BINDGEN"
        )
    except subprocess.TimeoutExpired as exc:
        raise GenerationError(
            f"generator timed out after {timeout} seconds",
            stdout=_as_text(exc.stdout),
            stderr=_as_text(exc.stderr),
        )

    if result.returncode != _EXIT_SUCCESS:
        message = f"generator failed with exit code {result.returncode}"
        detail = (result.stderr or "").strip()
        raise GenerationError(
            f"{message}: {detail}" if detail else message,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    logger.debug("Generator wrote %s bindings to %s", ", ".join(request.languages), request.out_dir)


def _as_text(output) -> str:
    # TimeoutExpired may carry bytes even when text=True was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output

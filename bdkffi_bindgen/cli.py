"""Command-line entry point: bdkffi-bindgen.

Options fall back to BDKFFI_BINDGEN_* environment variables, then to
bdkffi-bindgen.yaml, then to defaults (see BindgenSettings).
"""

from pathlib import Path
from typing import Optional

import pydantic
import structlog
import typer

from bdkffi_bindgen.core.config import get_settings
from bdkffi_bindgen.core.logging import configure_structlog
from bdkffi_bindgen.generator import GenerationError
from bdkffi_bindgen.language import UnsupportedLanguageError, supported_languages
from bdkffi_bindgen.orchestrator import BindgenOptions, run_bindgen
from bdkffi_bindgen.patcher import AnchorNotFoundError, BindingDecodeError

app = typer.Typer(
    name="bdkffi-bindgen",
    help="A tool to generate bdk-ffi language bindings.",
    add_completion=False,
)


@app.command()
def main(
    udl_file: Optional[Path] = typer.Option(
        None, "--udl-file", "-u", help="UDL file [env: BDKFFI_BINDGEN_UDL, default: src/bdk.udl]"
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help=f"Language to generate bindings for ({', '.join(supported_languages())}) "
        "[env: BDKFFI_BINDGEN_LANGUAGE]",
    ),
    out_dir: Optional[Path] = typer.Option(
        None,
        "--out-dir",
        "-o",
        help="Output directory to put generated language bindings [env: BDKFFI_BINDGEN_OUTPUT_DIR]",
    ),
    python_fixup_path: Optional[str] = typer.Option(
        None,
        "--python-fixup-path",
        "-p",
        help="Native library base name for the Python loader fixup "
        "[env: BDKFFI_BINDGEN_PYTHON_FIXUP_PATH]",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate bindings for one language, then patch the Python loader if asked."""
    try:
        settings = get_settings(
            udl=udl_file,
            language=language,
            output_dir=out_dir,
            python_fixup_path=python_fixup_path,
            debug=True if verbose else None,
        )
    except pydantic.ValidationError as exc:
        typer.echo(f"error: invalid configuration\n{exc}", err=True)
        raise typer.Exit(code=2)

    configure_structlog(debug=settings.debug)
    log = structlog.get_logger("bdkffi_bindgen.cli")

    try:
        options = BindgenOptions.from_settings(settings)
    except UnsupportedLanguageError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--language'")
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    try:
        result = run_bindgen(options, settings)
    except GenerationError as exc:
        typer.echo(f"error: {exc}", err=True)
        if exc.stderr and exc.stderr.strip() not in str(exc):
            typer.echo(exc.stderr.rstrip(), err=True)
        raise typer.Exit(code=1)
    except (AnchorNotFoundError, BindingDecodeError) as exc:
        typer.echo(f"error: cannot patch python bindings: {exc}", err=True)
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    log.info("bindgen_complete", **result.to_dict())

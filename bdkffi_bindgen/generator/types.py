"""Types for the binding generation step.

GenerationRequest carries the inputs of a single `uniffi-bindgen generate`
call and knows how to render itself as that command's arguments.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bdkffi_bindgen.errors import BindgenError


@dataclass(frozen=True)
class GenerationRequest:
    """Inputs for one run of the external binding generator.

    languages always holds exactly one canonical language name here, and
    config_file is always None; both are kept to mirror the generator's
    own interface.
    """

    udl_file: Path
    languages: list[str]
    out_dir: Path
    config_file: Optional[Path] = None
    try_format_code: bool = False

    def to_args(self) -> list[str]:
        args = ["generate"]
        for language in self.languages:
            args.extend(["--language", language])
        args.extend(["--out-dir", str(self.out_dir)])
        if self.config_file is not None:
            args.extend(["--config", str(self.config_file)])
        if not self.try_format_code:
            args.append("--no-format")
        args.append(str(self.udl_file))
        return args

    def to_dict(self) -> dict:
        return {
            "udl_file": str(self.udl_file),
            "languages": list(self.languages),
            "out_dir": str(self.out_dir),
            "config_file": str(self.config_file) if self.config_file else None,
            "try_format_code": self.try_format_code,
        }


class GenerationError(BindgenError):
    """Raised when the external generator fails.

    stdout and stderr are the generator's own output, unmodified.
    """

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)

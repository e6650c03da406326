from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_UDL_FILE = Path("src/bdk.udl")
CONFIG_FILENAME = "bdkffi-bindgen.yaml"


class BindgenSettings(BaseSettings):
    """Tool settings loaded from the environment and an optional YAML file.

    Every field can be set with a BDKFFI_BINDGEN_ prefixed environment
    variable, e.g. BDKFFI_BINDGEN_OUTPUT_DIR. Command-line options take
    precedence over all of these.

    Source priority
    ───────────────
    • init arguments (the CLI passes its options here)
    • environment variables
    • .env file
    • bdkffi-bindgen.yaml in the working directory
    • field defaults

    language stays a plain string: it is validated by parse_language()
    when the run starts, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="BDKFFI_BINDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        yaml_file=CONFIG_FILENAME,
    )

    # Interface definition to generate from
    udl: Path = DEFAULT_UDL_FILE

    # Target language name: kotlin, python or swift
    language: Optional[str] = None

    # Directory the generator writes into
    output_dir: Optional[Path] = None

    # Native library base name for the Python loader fixup.
    # Leave unset to skip patching.
    python_fixup_path: Optional[str] = None

    # Generator command; may include arguments, e.g. "cargo run --bin uniffi-bindgen --"
    uniffi_bindgen: str = "uniffi-bindgen"
    generator_timeout: int = 300

    debug: bool = False

    @field_validator("python_fixup_path", mode="before")
    @classmethod
    def blank_fixup_path_is_unset(cls, v):
        if isinstance(v, str) and not v:
            return None
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def get_settings(**overrides) -> BindgenSettings:
    """Load settings, letting non-None overrides win over every other source."""
    return BindgenSettings(**{k: v for k, v in overrides.items() if v is not None})

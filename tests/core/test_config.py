"""Tests for settings loading from env vars, YAML and overrides."""

from pathlib import Path

import pydantic
import pytest

from bdkffi_bindgen.core.config import BindgenSettings, get_settings


class TestDefaults:
    def test_defaults(self):
        settings = BindgenSettings()

        assert settings.udl == Path("src/bdk.udl")
        assert settings.language is None
        assert settings.output_dir is None
        assert settings.python_fixup_path is None
        assert settings.uniffi_bindgen == "uniffi-bindgen"
        assert settings.generator_timeout == 300
        assert settings.debug is False


class TestEnvironment:
    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_UDL", "other/bdk.udl")
        monkeypatch.setenv("BDKFFI_BINDGEN_LANGUAGE", "python")
        monkeypatch.setenv("BDKFFI_BINDGEN_OUTPUT_DIR", "build/python")
        monkeypatch.setenv("BDKFFI_BINDGEN_PYTHON_FIXUP_PATH", "libbdkffi")
        monkeypatch.setenv("BDKFFI_BINDGEN_GENERATOR_TIMEOUT", "60")

        settings = BindgenSettings()

        assert settings.udl == Path("other/bdk.udl")
        assert settings.language == "python"
        assert settings.output_dir == Path("build/python")
        assert settings.python_fixup_path == "libbdkffi"
        assert settings.generator_timeout == 60

    def test_language_is_not_validated_here(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_LANGUAGE", "cobol")
        assert BindgenSettings().language == "cobol"

    def test_blank_fixup_path_is_unset(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_PYTHON_FIXUP_PATH", "")
        assert BindgenSettings().python_fixup_path is None

    def test_invalid_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_GENERATOR_TIMEOUT", "soon")
        with pytest.raises(pydantic.ValidationError):
            BindgenSettings()


class TestYamlFile:
    def test_reads_yaml_from_working_directory(self, tmp_path):
        (tmp_path / "bdkffi-bindgen.yaml").write_text(
            "language: kotlin\n"
            "output_dir: out/kotlin\n"
            "uniffi_bindgen: cargo run --bin uniffi-bindgen --\n",
            encoding="utf-8",
        )

        settings = BindgenSettings()

        assert settings.language == "kotlin"
        assert settings.output_dir == Path("out/kotlin")
        assert settings.uniffi_bindgen == "cargo run --bin uniffi-bindgen --"

    def test_env_wins_over_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "bdkffi-bindgen.yaml").write_text("language: kotlin\n", encoding="utf-8")
        monkeypatch.setenv("BDKFFI_BINDGEN_LANGUAGE", "swift")

        assert BindgenSettings().language == "swift"


class TestGetSettings:
    def test_overrides_win_over_env(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_LANGUAGE", "swift")

        settings = get_settings(language="python")

        assert settings.language == "python"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("BDKFFI_BINDGEN_LANGUAGE", "swift")

        settings = get_settings(language=None, output_dir=None)

        assert settings.language == "swift"
        assert settings.output_dir is None

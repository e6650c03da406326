"""Tests for target language parsing and rendering."""

import pytest

from bdkffi_bindgen.errors import BindgenError
from bdkffi_bindgen.language import (
    Language,
    UnsupportedLanguageError,
    parse_language,
    supported_languages,
)


class TestParseLanguage:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("kotlin", Language.KOTLIN),
            ("python", Language.PYTHON),
            ("swift", Language.SWIFT),
        ],
    )
    def test_parses_supported_names(self, value, expected):
        assert parse_language(value) is expected

    @pytest.mark.parametrize("language", list(Language))
    def test_render_then_parse_round_trips(self, language):
        assert parse_language(str(language)) is language

    @pytest.mark.parametrize(
        "value",
        ["Python", "KOTLIN", " swift", "python\n", "", "py", "pythonx", "java", "rust"],
    )
    def test_rejects_other_strings(self, value):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            parse_language(value)
        assert exc_info.value.value == value

    def test_error_message_names_value_and_choices(self):
        with pytest.raises(UnsupportedLanguageError, match="'ruby'") as exc_info:
            parse_language("ruby")
        assert "kotlin, python, swift" in str(exc_info.value)

    def test_error_is_a_value_error_and_bindgen_error(self):
        with pytest.raises(ValueError):
            parse_language("go")
        with pytest.raises(BindgenError):
            parse_language("go")


class TestRender:
    def test_renders_canonical_lowercase(self):
        assert str(Language.KOTLIN) == "kotlin"
        assert str(Language.PYTHON) == "python"
        assert str(Language.SWIFT) == "swift"

    def test_f_string_uses_canonical_name(self):
        assert f"{Language.SWIFT}" == "swift"

    def test_supported_languages_lists_all_members(self):
        assert supported_languages() == ["kotlin", "python", "swift"]

"""Supported binding target languages.

The generator backend is chosen from a closed set of targets. Strings from the
command line or environment are parsed here and nowhere else; anything outside
the set is rejected before it can reach the generator or the patcher.
"""

from enum import StrEnum

from bdkffi_bindgen.errors import BindgenError


class UnsupportedLanguageError(BindgenError, ValueError):
    """Raised when a language string is not one of the supported targets."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Unsupported language {value!r}; "
            f"expected one of: {', '.join(supported_languages())}"
        )


class Language(StrEnum):
    """Binding target. Renders to its canonical lowercase name."""

    KOTLIN = "kotlin"
    PYTHON = "python"
    SWIFT = "swift"


def supported_languages() -> list[str]:
    return [language.value for language in Language]


def parse_language(value: str) -> Language:
    """Parse a target language name.

    Matching is exact and case-sensitive: "Python" or " python" are rejected
    rather than normalised.

    Raises:
        UnsupportedLanguageError: If value is not a supported target.
    """
    try:
        return Language(value)
    except ValueError:
        raise UnsupportedLanguageError(value) from None

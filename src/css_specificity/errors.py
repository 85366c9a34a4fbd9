"""Exception types raised at the caller boundary."""


class CssSpecificityError(Exception):
    """Base class for errors raised by css_specificity."""


class UnsupportedLanguageError(CssSpecificityError, ValueError):
    """Raised when a language id or file suffix maps to no known dialect."""

    def __init__(self, language_id: str):
        self.language_id = language_id
        super().__init__(f"Unsupported stylesheet language: {language_id!r}")

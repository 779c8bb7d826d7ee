from __future__ import annotations


class CurrencyParseError(ValueError):
    """Raised when text or a wire payload cannot be turned into a currency value.

    Attributes:
        field (str | None): Name of the offending wire field or text element, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

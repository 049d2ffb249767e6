# inputmask/core/definitions.py

"""Token characters recognized in mask templates."""


class TokenType:
    """Constants representing the default mask token alphabet."""

    NUMERIC = "N"
    ALPHA = "L"
    ALPHANUMERIC = "A"
    WILDCARD = "*"

    ALL = (NUMERIC, ALPHA, ALPHANUMERIC, WILDCARD)

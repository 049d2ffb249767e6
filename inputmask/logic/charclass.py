# inputmask/logic/charclass.py

"""ASCII character classification used when unmasking values."""

import re


class CharacterLogic:
    """Utility methods for ASCII-only character classes.

    The str.isalnum() family accepts non-ASCII letters and digits, so the
    class is spelled out as an explicit ASCII range.
    """

    # Pre-compiled regex patterns for performance
    NON_ALPHANUM = re.compile(r"[^a-zA-Z0-9]")

    @staticmethod
    def strip_non_alphanumeric(text: str) -> str:
        """Removes every character that is not an ASCII letter or digit.

        Args:
            text: Input string to sanitize

        Returns:
            The letters and digits of text, in order
        """
        return CharacterLogic.NON_ALPHANUM.sub("", text)

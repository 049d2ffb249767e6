# inputmask/engine/mask_engine.py

"""Template-driven mask engine for text input fields."""

import logging
from typing import Dict, Mapping, Optional, Pattern

from inputmask.core.loader import TokenLoader
from inputmask.logic.charclass import CharacterLogic

logger = logging.getLogger(__name__)


class MaskEngine:
    """Applies a token/literal template to input and strips it back out.

    Template characters found in the token alphabet (by default N, L, A
    and *) accept one input character matching their regex. Every other
    template character is a literal, emitted verbatim.

    Example:
        >>> engine = MaskEngine("NNN-LLLL")
        >>> engine.apply_mask("12a3BcDe")
        '123-BcDe'
        >>> engine.remove_mask("(12) 34-abcd")
        '1234abc'
    """

    def __init__(
        self,
        template: str = "",
        patterns: Optional[Mapping[str, Pattern]] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            template: Mask template; an empty template masks as identity
            patterns: Token -> compiled regex mapping. Defaults to the
                alphabet loaded from tokens.yaml.
        """
        if patterns is None:
            patterns = TokenLoader.get_instance().get_patterns()

        self._patterns: Dict[str, Pattern] = dict(patterns)
        self._template = template
        self._raw_capacity: Optional[int] = None

    @property
    def template(self) -> str:
        return self._template

    @template.setter
    def template(self, value: str) -> None:
        self._template = value
        self._raw_capacity = None

    def set_template(self, template: str) -> None:
        """Replaces the template and invalidates the cached raw capacity."""
        self.template = template
        logger.debug(f"Mask template set to {template!r}")

    @property
    def raw_capacity(self) -> int:
        """Maximum number of raw characters the template can hold.

        Counts token characters only. Example: 'NNN-LLLL' holds 7.
        """
        if self._raw_capacity is None:
            self._raw_capacity = sum(1 for c in self._template if self.is_token(c))
        return self._raw_capacity

    def is_token(self, char: str) -> bool:
        """Returns True if char is part of the token alphabet."""
        return char in self._patterns

    def apply_mask(self, value: str) -> str:
        """Formats value according to the template.

        Input characters failing the predicate of the current token are
        dropped and the same token is retried against the next character.
        Literals are inserted on the user's behalf; a typed literal is
        consumed rather than duplicated. Processing stops as soon as
        either the template or the input is exhausted.

        Args:
            value: Value typed or pasted into the field

        Returns:
            The masked value, never longer than the template
        """
        template = self._template
        if not template:
            return value

        result = []
        template_index = 0
        value_index = 0

        while template_index < len(template):
            if value_index >= len(value):
                break

            mask_char = template[template_index]
            value_char = value[value_index]
            pattern = self._patterns.get(mask_char)

            if pattern is not None:
                if pattern.fullmatch(value_char):
                    result.append(value_char)
                    template_index += 1
                value_index += 1
            else:
                result.append(mask_char)
                if value_char == mask_char:
                    value_index += 1
                template_index += 1

        masked = "".join(result)
        logger.debug(
            "Mask applied",
            extra={
                "template": template,
                "input_length": len(value),
                "output_length": len(masked),
            },
        )
        return masked

    def remove_mask(self, value: str) -> str:
        """Returns the letters and digits of value, truncated to raw_capacity.

        Example: '(12) 34-abcd' becomes '1234abc' under 'NNN-LLLL'.
        """
        raw = CharacterLogic.strip_non_alphanumeric(value)
        return raw[: self.raw_capacity]

    def __repr__(self):
        return (
            f"<MaskEngine "
            f"template={self._template!r} "
            f"raw_capacity={self.raw_capacity}>"
        )

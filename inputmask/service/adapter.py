# inputmask/service/adapter.py

"""Two-way binding between a masked text field and its form value.

The displayed value carries the template literals; the form value is the
raw letters and digits. UI code forwards its events to a MaskedField and
registers callbacks to receive raw values and touch notifications.
"""

import logging
from typing import Callable, Optional

from inputmask.core.exceptions import ValidationError
from inputmask.engine.mask_engine import MaskEngine

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], None]
TouchedCallback = Callable[[], None]


def _noop_change(_: str) -> None:
    pass


def _noop_touched() -> None:
    pass


class MaskedField:
    """Adapter keeping a field's displayed (masked) and raw values in sync."""

    def __init__(self, engine: MaskEngine) -> None:
        self.engine = engine
        self._displayed = ""
        self._on_change: ChangeCallback = _noop_change
        self._on_touched: TouchedCallback = _noop_touched

    @property
    def displayed(self) -> str:
        """Value currently shown in the field."""
        return self._displayed

    def set_template(self, template: str) -> None:
        self.engine.set_template(template)

    def register_on_change(self, fn: ChangeCallback) -> None:
        """Registers the callback receiving the raw value after each input."""
        self._on_change = fn

    def register_on_touched(self, fn: TouchedCallback) -> None:
        """Registers the callback invoked when the field loses focus."""
        self._on_touched = fn

    def read(self, value: Optional[str]) -> str:
        """Pushes a form value into the field (model -> view).

        Args:
            value: Form value; None leaves the field untouched

        Returns:
            The displayed value
        """
        if value is None:
            return self._displayed

        self._displayed = self.engine.apply_mask(value)
        return self._displayed

    def write(self, value: str) -> str:
        """Handles user input (view -> model).

        The field is redrawn with the masked value while the raw value,
        extracted from what was typed, goes to the change callback.

        Args:
            value: Current contents of the field as typed

        Returns:
            The raw value sent to the form

        Raises:
            ValidationError: If value is not a string
        """
        if not isinstance(value, str):
            logger.error(f"Invalid field input type received: {type(value)}")
            raise ValidationError(f"Field input must be a string, got {type(value)}")

        masked = self.engine.apply_mask(value)
        raw = self.engine.remove_mask(value)

        self._displayed = masked
        logger.debug(
            "Field input processed",
            extra={"displayed_length": len(masked), "raw_length": len(raw)},
        )
        self._on_change(raw)
        return raw

    def blur(self) -> None:
        """Handles the field losing focus."""
        self._on_touched()

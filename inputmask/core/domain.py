# inputmask/core/domain.py

"""Domain models for mask processing results."""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class MaskResult:
    """Result object returned by the mask service.

    Attributes:
        original_text: Value as typed or pasted by the user
        masked_text: Value formatted by the template, as displayed
        raw_text: Letters and digits handed to the form consumer
        template: Template used to produce the result
        metadata: Additional processing information
    """

    original_text: str
    masked_text: str
    raw_text: str
    template: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

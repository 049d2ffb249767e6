# inputmask/service/pipeline.py

"""Main mask processing pipeline."""

import logging
import threading
from typing import Optional

from inputmask.service.config import settings
from inputmask.engine.mask_engine import MaskEngine
from inputmask.core.domain import MaskResult
from inputmask.core.exceptions import (
    ConfigurationError,
    InitializationError,
)

logger = logging.getLogger(__name__)


class MaskService:
    """Singleton service wrapper for the default mask engine.

    The default engine uses settings.default_template and is shared by
    every request that does not supply its own template.
    """

    _instance: Optional[MaskEngine] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> MaskEngine:
        """Returns singleton mask engine instance.

        Returns:
            MaskEngine configured with the default template

        Raises:
            InitializationError: If engine initialization fails
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing default mask engine")
                        cls._instance = MaskEngine(settings.default_template)
                        logger.info(
                            "Default mask engine initialized successfully",
                            extra={"template": settings.default_template},
                        )

                    except Exception as e:
                        logger.error(
                            "Failed to initialize mask engine", exc_info=True
                        )
                        raise InitializationError(
                            "Mask engine initialization failed"
                        ) from e

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the default engine so the next access rebuilds it."""
        with cls._lock:
            cls._instance = None


def process_input(value: str, template: Optional[str] = None) -> MaskResult:
    """Main entry point for masking a field value.

    Args:
        value: Value typed or pasted by the user
        template: Mask template; the configured default when omitted

    Returns:
        MaskResult with masked and raw values.
        On failure, returns a result indicating the error safely.
    """
    if value is None:
        logger.warning("No value provided for masking")
        return MaskResult(
            original_text="",
            masked_text="",
            raw_text="",
            template=template or "",
            metadata={"error": "No value provided"},
        )

    if not isinstance(value, str):
        logger.error(f"Invalid input type received: {type(value)}")
        return MaskResult(
            original_text=str(value),
            masked_text=str(value),
            raw_text="",
            template=template or "",
            metadata={"error": "Invalid input format"},
        )

    try:
        if template is None:
            engine = MaskService.get_instance()
        else:
            engine = MaskEngine(template)

        masked = engine.apply_mask(value)
        raw = engine.remove_mask(value)

        logger.info(
            "Processed mask request",
            extra={
                "input_length": len(value),
                "raw_capacity": engine.raw_capacity,
            },
        )

        return MaskResult(
            original_text=value,
            masked_text=masked,
            raw_text=raw,
            template=engine.template,
        )

    except (InitializationError, ConfigurationError) as e:
        # Known errors, log with context but hide internal details in response
        logger.error(
            f"Known error during masking: {type(e).__name__}",
            exc_info=True,
            extra={"input_length": len(value)},
        )
        return MaskResult(
            original_text=value,
            masked_text=value,
            raw_text="",
            template=template or "",
            metadata={
                "error": "The mask service encountered a configuration error.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in mask pipeline",
            exc_info=True,
            extra={"input_length": len(value)},
        )
        return MaskResult(
            original_text=value,
            masked_text=value,
            raw_text="",
            template=template or "",
            metadata={
                "error": "An unexpected system error occurred.",
                "status": "failed",
            },
        )

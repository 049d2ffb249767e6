# inputmask/__init__.py

"""Character-mask engine for formatted text input fields."""

from inputmask.engine.mask_engine import MaskEngine

__all__ = ["MaskEngine"]

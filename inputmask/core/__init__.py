# inputmask/core/__init__.py

"""Core domain models and utilities used across the mask engine.

This package provides the token alphabet, domain types, exceptions and
the token configuration loader shared by the rest of the application.
"""

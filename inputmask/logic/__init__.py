# inputmask/logic/__init__.py

"""ASCII character classification helpers."""

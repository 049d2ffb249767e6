# inputmask/service/__init__.py

"""Service layer: settings, field adapter and the processing pipeline."""

"""Clock and logging helpers."""

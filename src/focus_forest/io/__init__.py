"""Process boundary helpers: logging bootstrap and settings file."""

"""Static documentation site builder for versioned specification repositories."""

__version__ = "0.1.0"

"""Statistics for arena match histories read from semicolon-separated logs."""

__version__ = "0.1.0"
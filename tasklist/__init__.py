"""Task list client for a remote todo API."""

__version__ = "0.1.0"

"""Command-line parsing and process running for a tiny shell, a minimal ls and simple data structures."""

__version__ = "0.1.0"
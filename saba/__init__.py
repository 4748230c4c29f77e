"""A minimal HTTP client with URL and response parsing."""

__version__ = "0.1.0"
__all__ = ["cli", "client", "errors", "http", "url"]
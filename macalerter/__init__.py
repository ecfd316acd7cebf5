"""Send macOS desktop notifications by running an alerter executable."""

__version__ = "26.5.1"

__all__ = ["alerter", "binary", "errors", "handle", "response", "showcase"]
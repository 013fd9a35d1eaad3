"""Organization folder listing with offset-token pagination."""

__version__ = "0.1.0"

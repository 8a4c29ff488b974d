"""Building blocks for file system watchers: event types, synchronisation, UTF conversion and file system queries."""

__version__ = "0.1.0"
__all__ = ["types", "sync", "utf8", "utf16", "utf32", "filesystem", "system"]
"""Local inter-application connection primitives: UUIDs, string helpers, messages, announcement directories and TCP auto-connection."""

__version__ = "0.1.0"
"""Format validators and shared types for signature-based file carving."""

__version__ = "0.3.0"
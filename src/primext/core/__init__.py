"""Core library plumbing."""

from primext.core.config import DEFAULTS, ExtensionDefaults

__all__ = ["DEFAULTS", "ExtensionDefaults"]

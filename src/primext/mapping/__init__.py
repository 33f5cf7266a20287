"""Lookup helpers for string-keyed collections."""

from primext.mapping.lookup import CONVERTERS, get_value

__all__ = ["CONVERTERS", "get_value"]

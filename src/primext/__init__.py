"""primext: extension utilities for strings and string-keyed collections."""

__version__ = "0.1.0"

# Error kinds and enumerations
from primext.errors import (  # noqa: E402, F401
    InvalidArgumentError,
    InvalidFormatError,
    PrimextError,
)
from primext.model import GuidFormat, NumberStyles  # noqa: E402, F401

# Lookup helper
from primext.mapping import get_value  # noqa: E402, F401

# String extensions
from primext.text import *  # noqa: E402, F401, F403
from primext.text import __all__ as _text_all  # noqa: E402

__all__ = [
    "__version__",
    "PrimextError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "GuidFormat",
    "NumberStyles",
    "get_value",
    *_text_all,
]

"""Typed lookup over string-keyed multi-value collections.

Accepted collections:

  * any ``Mapping[str, str | list[str] | tuple[str, ...] | None]`` (query
    dicts, headers)
  * multi-dicts exposing ``getlist(key)`` (werkzeug ``MultiDict``, Django
    ``QueryDict``)

Several values under one key are joined with ``","`` before conversion,
the same way form and query-string collections flatten repeated fields.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Mapping

from primext.errors import InvalidArgumentError, InvalidFormatError
from primext.model import NumberStyles
from primext.text.convert import to_datetime
from primext.text.numbers import try_parse_decimal, try_parse_float, try_parse_integer

logger = logging.getLogger(__name__)


def _to_int(raw: str) -> int:
    result = try_parse_integer(raw, NumberStyles.INTEGER)
    if not result.success:
        raise InvalidFormatError("int", raw)
    return result.value


def _to_float(raw: str) -> float:
    result = try_parse_float(raw, NumberStyles.FLOAT | NumberStyles.ALLOW_THOUSANDS)
    if not result.success:
        raise InvalidFormatError("float", raw)
    return result.value


def _to_decimal(raw: str) -> Decimal:
    result = try_parse_decimal(raw, NumberStyles.NUMBER)
    if not result.success:
        raise InvalidFormatError("Decimal", raw)
    return result.value


def _to_bool(raw: str) -> bool:
    token = raw.strip().lower()
    if token == "true":
        return True
    if token == "false":
        return False
    raise InvalidFormatError("bool", raw)


# Explicit type-tag dispatch: target type -> converter from the raw string.
CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: _to_int,
    float: _to_float,
    Decimal: _to_decimal,
    bool: _to_bool,
    datetime: to_datetime,
}


def _raw_value(collection: Any, key: str, target: type) -> str | None:
    if hasattr(collection, "getlist"):
        values = collection.getlist(key)
    else:
        values = collection[key]
    if values is None or isinstance(values, str):
        return values
    if not isinstance(values, (list, tuple)) or not all(v is None or isinstance(v, str) for v in values):
        raise InvalidFormatError(target.__name__, values, detail="expected a string or a sequence of strings")
    values = [v for v in values if v is not None]
    if not values:
        return None
    return ",".join(values)


def get_value(
    collection: Mapping[str, Any],
    key: str,
    default: Any = None,
    *,
    as_type: type | None = None,
) -> Any:
    """Return the value under *key* converted to *as_type*, or *default*.

    The target type is *as_type* when given, else ``type(default)``, else
    ``str``. An absent key returns *default* unconverted.

    Raises:
        InvalidArgumentError: the target type has no converter.
        InvalidFormatError: the key is present but its value is not a
            string or a list or tuple of strings, or it does not
            convert. The default is not substituted in that case.
    """
    if key not in collection.keys():
        return default

    target = as_type if as_type is not None else (type(default) if default is not None else str)
    converter = CONVERTERS.get(target)
    if converter is None:
        raise InvalidArgumentError(f"No conversion to {target.__name__} is available.", param="as_type")

    raw = _raw_value(collection, key, target)
    if raw is None:
        if target is str:
            return None
        raise InvalidFormatError(target.__name__, raw)
    try:
        return converter(raw)
    except InvalidFormatError:
        logger.debug(f"value under {key!r} did not convert to {target.__name__}: {raw!r}")
        raise

"""Culture (locale) identifier validation against the host locale database."""

from __future__ import annotations

import locale
import re

from primext.text.blank import is_blank

# language[-script][-region][-variant...], "-" or "_" between subtags
_TAG = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|[0-9]{3}))?"
    r"(?:[-_](?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}))*$"
)


def _known_languages() -> frozenset[str]:
    return frozenset(
        alias for alias in locale.locale_alias if re.fullmatch(r"[a-z]{2,3}", alias)
    )


_LANGUAGES = _known_languages()


def is_valid_culture(name: str | None) -> bool:
    """True if *name* is a well-formed tag whose language the host knows.

    ``en``, ``en-US``, ``zh_CN`` and ``zh-Hans-CN`` are valid; ``english``,
    ``xx-YY`` and ``en-`` are not. A full tag listed in ``locale.locale_alias``
    is always accepted.
    """
    if is_blank(name):
        return False
    candidate = name.strip()
    m = _TAG.match(candidate)
    if m is None:
        return False
    if candidate.replace("-", "_").lower() in locale.locale_alias:
        return True
    return m.group("language").lower() in _LANGUAGES

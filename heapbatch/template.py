"""
String templating with configurable delimiters.

    engine = TemplateEngine()
    engine.add("name", "world")
    engine.format("hello ${name}")   # -> "hello world"

Placeholders are ``open + key + close`` where key is ASCII ``\\w+``. Each
placeholder in the input is replaced once, left to right; substituted values
are inserted literally and never scanned again.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List

from .errors import InvalidTemplateError, InvalidTemplateKeyError, MissingTemplateKeyError

logger = logging.getLogger(__name__)

DEFAULT_OPEN_STRING = "${"
DEFAULT_CLOSE_STRING = "}"

# ASCII word characters only, the whole key
_KEY_RE = re.compile(r"\w+", re.ASCII)


def _valid_delimiters(open_string: str, close_string: str) -> bool:
    if not open_string or not close_string:
        return False
    if "\\" in open_string or "\\" in close_string:
        return False
    return True


class TemplateEngine:
    """Replace ``${key}``-style placeholders with registered values."""

    def __init__(self, open_string: str = DEFAULT_OPEN_STRING, close_string: str = DEFAULT_CLOSE_STRING) -> None:
        if not _valid_delimiters(open_string, close_string):
            raise InvalidTemplateError("open or close string is not valid")
        self.open_string = open_string
        self.close_string = close_string
        self._vars: Dict[str, str] = {}
        self._pattern = re.compile(re.escape(open_string) + r"(\w+)" + re.escape(close_string), re.ASCII)

    def add(self, key: str, value: str) -> None:
        """Register `value` for `key`, replacing any previous value.

        Raises:
            InvalidTemplateKeyError: if `key` is not made only of ASCII word characters.
        """
        if not _KEY_RE.fullmatch(key):
            raise InvalidTemplateKeyError(f"key must be ASCII word characters: {key!r}")
        self._vars[key] = value

    def remove(self, key: str) -> bool:
        """Forget `key`; return True if it was registered."""
        if key not in self._vars:
            return False
        del self._vars[key]
        return True

    def keys(self) -> List[str]:
        return list(self._vars)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def _substitute(self, match: "re.Match[str]") -> str:
        key = match.group(1)
        try:
            return self._vars[key]
        except KeyError:
            raise MissingTemplateKeyError(f"template does not contain key: {key}") from None

    def format(self, text: str) -> str:
        """Return `text` with every placeholder replaced.

        Raises:
            MissingTemplateKeyError: if a placeholder names an unregistered key.
        """
        out = self._pattern.sub(self._substitute, text)
        logger.debug("Formatted %d chars with %d keys", len(text), len(self._vars))
        return out

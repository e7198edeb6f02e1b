"""Quote code and comments so that they can be embedded in error messages."""

from __future__ import annotations

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def _escape(char: str) -> str:
    escaped = _ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\x{ord(char):02x}"
    return char


def quote(text: str) -> str:
    """Wrap ``text`` in double quotes, escaping backslashes, quotes and control characters."""
    return '"' + "".join(_escape(char) for char in text) + '"'

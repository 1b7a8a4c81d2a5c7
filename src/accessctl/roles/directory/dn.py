"""Directory – distinguished-name and search-filter helpers.

DN patterns use positional placeholders, e.g. ``uid={0},ou=people``.
Escaping follows RFC 4514 for DN attribute values and RFC 4515 for filter
assertion values.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from urllib.parse import unquote, urlsplit

from accessctl.kernel.errors import InvalidDnError

_PLACEHOLDER = re.compile(r"\{(\d+)\}")
_DN_SPECIAL = frozenset(',+"\\<>;=')
_DN_ESCAPE = re.compile(r"\\([0-9a-fA-F]{2}|.)")
_UNESCAPED_COMMA = re.compile(r"(?<!\\),")
_FILTER_ESCAPES = {"\\": r"\5c", "*": r"\2a", "(": r"\28", ")": r"\29", "\x00": r"\00"}


def parse_root_dn_from_url(url: str) -> str:
    """Return the base DN embedded in an LDAP URL (``ldap://host/dc=x,dc=y``)."""
    if not url:
        return ""
    return unquote(urlsplit(url).path.lstrip("/"))


def encode_dn_value(value: str) -> str:
    """Escape *value* for use as an RDN attribute value."""
    out: list[str] = []
    last = len(value) - 1
    for i, ch in enumerate(value):
        if ch in _DN_SPECIAL or (ch == "#" and i == 0) or (ch == " " and i in (0, last)):
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def decode_dn_value(value: str) -> str:
    """Reverse :func:`encode_dn_value`; ``\\hh`` escapes are UTF-8 octets."""
    octets = bytearray()
    position = 0
    for match in _DN_ESCAPE.finditer(value):
        octets += value[position:match.start()].encode("utf-8")
        token = match.group(1)
        octets += bytes([int(token, 16)]) if len(token) == 2 else token.encode("utf-8")
        position = match.end()
    octets += value[position:].encode("utf-8")
    return octets.decode("utf-8", errors="replace")


def encode_filter_value(value: str) -> str:
    return "".join(_FILTER_ESCAPES.get(ch, ch) for ch in value)


def format_filter(template: str, params: Sequence[str], *, escape: bool = True) -> str:
    """Substitute ``{n}`` placeholders in a search filter.

    Placeholders without a matching parameter are left as they are.
    """

    def _sub(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(params):
            return match.group(0)
        return encode_filter_value(params[index]) if escape else params[index]

    return _PLACEHOLDER.sub(_sub, template)


def join_dn(root: str, partial: str) -> str:
    """Append *root* to the (more specific) *partial* DN after validating both."""
    _validate_dn(partial)
    if not root:
        return partial
    _validate_dn(root)
    return f"{partial},{root}"


def _validate_dn(dn: str) -> None:
    if not dn.strip():
        raise InvalidDnError(dn, "empty DN")
    for rdn in _UNESCAPED_COMMA.split(dn):
        attribute, sep, _ = rdn.partition("=")
        if not sep or not attribute.strip():
            raise InvalidDnError(dn, f"malformed RDN {rdn!r}")


class DnPattern:
    """Positional DN template such as ``uid={0},ou=people``.

    :meth:`parse` matches the pattern against the start of a DN, so a
    relative pattern also parses fully-qualified member DNs
    (``uid=alice,ou=people,dc=example,dc=com`` → ``["alice"]``).
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        pieces = _PLACEHOLDER.split(pattern)
        regex: list[str] = []
        self._indexes: list[int] = []
        for position, piece in enumerate(pieces):
            if position % 2 == 0:
                regex.append(re.escape(piece))
            else:
                self._indexes.append(int(piece))
                is_last = position == len(pieces) - 2 and not pieces[-1]
                regex.append("(.+)" if is_last else "(.+?)")
        self._regex = re.compile("".join(regex), re.IGNORECASE)

    def format(self, *args: str) -> str:
        return format_filter(self.pattern, args, escape=False)

    def parse(self, value: str) -> list[str]:
        match = self._regex.match(value)
        if match is None or not self._indexes:
            raise InvalidDnError(value, f"does not match pattern {self.pattern!r}")
        result = [""] * (max(self._indexes) + 1)
        for index, captured in zip(self._indexes, match.groups()):
            result[index] = captured
        return result

    def __repr__(self) -> str:
        return f"DnPattern({self.pattern!r})"


__all__ = [
    "DnPattern",
    "decode_dn_value",
    "encode_dn_value",
    "encode_filter_value",
    "format_filter",
    "join_dn",
    "parse_root_dn_from_url",
]

"""Checking of DNS-style names as used in resource name segments."""

from __future__ import annotations

_MAX_LABEL = 63


def _is_label_char(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or ("0" <= c <= "9") or c == "_"


def is_domain_name(s: str) -> bool:
    """Report whether s is a syntactically valid domain name (RFC 1035, RFC 3696)."""
    length = len(s)
    if length == 0 or length > 254 or (length == 254 and not s.endswith(".")):
        return False
    last = "."
    part_length = 0
    for c in s:
        if _is_label_char(c):
            part_length += 1
        elif c == "-":
            if last == ".":
                return False
            part_length += 1
        elif c == ".":
            if last in (".", "-"):
                return False
            if part_length > _MAX_LABEL or part_length == 0:
                return False
            part_length = 0
        else:
            return False
        last = c
    return last != "-" and part_length <= _MAX_LABEL
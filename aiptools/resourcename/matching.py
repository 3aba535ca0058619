"""Matching of resource names against resource name patterns."""

from __future__ import annotations

from aiptools.resourcename.scanner import Scanner


def match(pattern: str, name: str) -> bool:
    """Report whether name matches the resource name pattern."""
    name_scanner = Scanner(name)
    pattern_scanner = Scanner(pattern)
    for pattern_segment in pattern_scanner:
        if not name_scanner.scan():
            return False
        name_segment = name_scanner.segment
        if name_segment.is_variable():
            return False
        if pattern_segment.is_wildcard():
            return False
        if pattern_segment.is_variable():
            if name_segment == "":
                return False
        elif name_segment != pattern_segment:
            return False
    if name_scanner.scan():
        return False
    if pattern_scanner.segment == "":
        return False
    return not pattern_scanner.full
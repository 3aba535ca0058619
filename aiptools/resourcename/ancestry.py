"""Relationships between resource names: ancestors, parents and wildcards."""

from __future__ import annotations

from collections.abc import Iterator

from aiptools.resourcename.scanner import Scanner


def ancestor(name: str, pattern: str) -> str | None:
    """Return the ancestor of name that matches pattern, or None if there is none.

    Wildcards are not supported in the pattern.
    """
    if not name or not pattern:
        return None
    name_scanner = Scanner(name)
    for pattern_segment in Scanner(pattern):
        if not name_scanner.scan():
            return None
        if pattern_segment.is_wildcard():
            return None
        if not pattern_segment.is_variable() and pattern_segment != name_scanner.segment:
            return None
    return name[: name_scanner.end]


def contains_wildcard(name: str) -> bool:
    """Report whether name contains any wildcard segments."""
    return any(segment.is_wildcard() for segment in Scanner(name))


def has_parent(name: str, parent: str) -> bool:
    """Report whether name has the given parent.

    Wildcard segments in the parent match any segment. A resource ID without a
    revision is a parent of the same resource ID with a revision.
    """
    if not name or not parent or name == parent:
        return False
    name_scanner = Scanner(name)
    parent_scanner = Scanner(parent)
    for parent_segment in parent_scanner:
        if not name_scanner.scan():
            return False
        if parent_segment.is_wildcard():
            continue
        name_literal = name_scanner.segment.literal()
        parent_literal = parent_segment.literal()
        if (
            name_literal.has_revision()
            and not parent_literal.has_revision()
            and name_literal.resource_id() == parent_literal.resource_id()
        ):
            continue
        if parent_segment != name_scanner.segment:
            return False
    if parent_scanner.full and name_scanner.full:
        return parent_scanner.service_name == name_scanner.service_name
    return True


def range_parents(name: str) -> Iterator[str]:
    """Yield every parent of name, from the root ancestor down to the closest parent.

    Collection segments are included. For full resource names the service is omitted.
    """
    scanner = Scanner(name)
    if not scanner.scan():
        return
    start = scanner.start
    if scanner.end != len(name):
        yield name[start : scanner.end]
    while scanner.scan():
        if scanner.end != len(name):
            yield name[start : scanner.end]
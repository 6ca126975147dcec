"""Matching of request paths against prefixes with wildcards."""

from __future__ import annotations


def prefix_matches(prefix: str, request_path: str) -> bool:
    """Return True if ``request_path`` starts with the segments of ``prefix``.

    A ``*`` segment in the prefix matches any single segment.
    """
    prefixes = prefix.split("/")
    segments = request_path.split("/")
    if len(prefixes) > len(segments):
        return False
    return all(p == "*" or p == s for p, s in zip(prefixes, segments))
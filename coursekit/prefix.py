"""Matching of request paths against path prefixes with wildcards."""

from __future__ import annotations

from itertools import chain


def prefix_matches(prefix: str, request_path: str) -> bool:
    """Return whether ``request_path`` starts with the segments of ``prefix``.

    A ``*`` segment in ``prefix`` matches any single segment.
    """
    segments = chain(request_path.split("/"), [None])
    for expected, actual in zip(prefix.split("/"), segments):
        if actual is None:
            return False
        if expected != "*" and expected != actual:
            return False
    return True
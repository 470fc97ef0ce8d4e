from __future__ import annotations


def normalize(path: str) -> str:
    """
    Canonical form used for every path comparison.

    Only trailing slashes are removed. Internal slashes, percent-escapes and
    case are left exactly as given, so "/Users//{id}/" -> "/Users//{id}".
    """
    # a run of trailing slashes goes as a whole so normalize() stays idempotent
    return path.rstrip("/")


def split_segments(path: str) -> list[str]:
    # "/a/{id}" -> ["", "a", "{id}"]; the leading "" appears on both sides of a comparison
    return path.split("/")


def is_param_segment(segment: str) -> bool:
    return segment.startswith("{")

from __future__ import annotations

from pathoverlap.domain.models import ParamRule
from pathoverlap.paths.normalize import is_param_segment, split_segments


def segments_overlap(
    candidate: str,
    existing: str,
    rule: ParamRule = ParamRule.EXISTING,
) -> bool:
    """
    True if some concrete request path could be routed to both templates.

    Both arguments must already be normalized. Paths are compared segment by
    segment and must have the same number of segments; there is no
    multi-segment or trailing wildcard.

    Under ParamRule.EXISTING only a `{...}` segment of `existing` absorbs a
    literal from `candidate`:
      segments_overlap("/a/b", "/a/{id}")  -> True
      segments_overlap("/a/{id}", "/a/b")  -> False
    ParamRule.SYMMETRIC lets either side's `{...}` segment match.
    """
    cand_segs = split_segments(candidate)
    exist_segs = split_segments(existing)

    if len(cand_segs) != len(exist_segs):
        return False

    symmetric = rule == ParamRule.SYMMETRIC
    for c, e in zip(cand_segs, exist_segs):
        if c == e or is_param_segment(e):
            continue
        if symmetric and is_param_segment(c):
            continue
        return False

    return True

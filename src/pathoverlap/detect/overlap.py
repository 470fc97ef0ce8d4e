from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Optional, Union

from pathoverlap.domain.models import Endpoint, MethodScope, OverlapRecord, ParamRule
from pathoverlap.index.endpoint_index import EndpointIndex
from pathoverlap.paths.matcher import segments_overlap
from pathoverlap.paths.normalize import normalize

IndexLike = Union[EndpointIndex, Mapping[str, Iterable[str]]]


def _as_index(index: IndexLike) -> EndpointIndex:
    if isinstance(index, EndpointIndex):
        return index
    return EndpointIndex.from_tree(index)


def _declares_method(endpoint: Endpoint, method: str, fold_method_case: bool) -> bool:
    if fold_method_case:
        return method in {m.lower() for m in endpoint.methods}
    return method in endpoint.methods


def check_single(
    candidate_path: str,
    candidate_method: Optional[str],
    index: IndexLike,
    *,
    rule: ParamRule = ParamRule.EXISTING,
    fold_method_case: bool = False,
) -> Optional[str]:
    """
    Return the first indexed path the candidate route would collide with.

    The candidate method is lower-cased and must appear verbatim in the
    entry's declared methods; no method means any entry qualifies. Entries
    are tried in index order and the first hit wins.
    """
    path = normalize(candidate_path)
    method = candidate_method.lower() if candidate_method else None

    for ep in _as_index(index):
        if not (path == ep.path or segments_overlap(path, ep.path, rule)):
            continue
        if method is None or _declares_method(ep, method, fold_method_case):
            return ep.path

    return None


def check_all(
    index: IndexLike,
    *,
    rule: ParamRule = ParamRule.SYMMETRIC,
    method_scope: MethodScope = MethodScope.ANY,
) -> list[OverlapRecord]:
    """
    Every pair of indexed paths whose shapes overlap, earlier path first.

    With MethodScope.ANY declared methods are ignored entirely; SHARED keeps
    only pairs that declare at least one common method token.
    """
    entries = list(_as_index(index))
    overlaps: list[OverlapRecord] = []

    for i, first in enumerate(entries):
        for second in entries[i + 1:]:
            if not segments_overlap(first.path, second.path, rule):
                continue
            if method_scope == MethodScope.SHARED and not set(first.methods) & set(second.methods):
                continue
            overlaps.append(OverlapRecord(path1=first.path, path2=second.path))

    return overlaps

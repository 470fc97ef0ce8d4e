from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional, Union

from pydantic import ValidationError

from pathoverlap.domain.errors import MalformedDocumentError
from pathoverlap.domain.models import Endpoint, SpecDocument
from pathoverlap.paths.normalize import normalize


class EndpointIndex:
    """Ordered, read-only mapping of normalized path -> declared methods.

    Entries keep the position at which their path was first seen. A later
    duplicate path replaces the methods but not the position.
    """

    def __init__(self, endpoints: Iterable[Endpoint] = ()) -> None:
        self._entries: list[Endpoint] = []
        self._positions: dict[str, int] = {}
        for ep in endpoints:
            self._put(ep)

    @classmethod
    def from_tree(cls, tree: Mapping[str, Iterable[str]]) -> "EndpointIndex":
        """Index a plain {path: methods} mapping, normalizing each path."""
        return cls(
            Endpoint(path=normalize(path), methods=_ordered_unique(methods))
            for path, methods in tree.items()
        )

    def _put(self, endpoint: Endpoint) -> None:
        pos = self._positions.get(endpoint.path)
        if pos is None:
            self._positions[endpoint.path] = len(self._entries)
            self._entries.append(endpoint)
        else:
            self._entries[pos] = endpoint

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._positions

    def __getitem__(self, position: int) -> Endpoint:
        return self._entries[position]

    def paths(self) -> list[str]:
        return [ep.path for ep in self._entries]

    def methods_for(self, path: str) -> Optional[tuple[str, ...]]:
        pos = self._positions.get(path)
        if pos is None:
            return None
        return self._entries[pos].methods

    def to_tree(self) -> dict[str, list[str]]:
        # JSON-ready shape: {"/users/{id}": ["get", "delete"], ...}
        return {ep.path: list(ep.methods) for ep in self._entries}


def _ordered_unique(tokens: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for t in tokens:
        if t in seen:
            continue
        seen.add(t)
        out.append(t)
    return tuple(out)


def build_index(document: Union[SpecDocument, Mapping[str, Any]]) -> EndpointIndex:
    """
    Build an EndpointIndex from a Swagger/OpenAPI document.

    Methods for a path are the keys of its path item, verbatim. Raises
    MalformedDocumentError when the document has no `paths` mapping.
    """
    if not isinstance(document, SpecDocument):
        if not isinstance(document, Mapping):
            raise MalformedDocumentError(
                f"specification document must be an object, got {type(document).__name__}"
            )
        try:
            document = SpecDocument.model_validate(dict(document))
        except ValidationError as e:
            raise MalformedDocumentError(f"specification document has no usable 'paths': {e}") from e

    return EndpointIndex(
        Endpoint(path=normalize(raw_path), methods=_ordered_unique(item.keys()))
        for raw_path, item in document.paths.items()
    )

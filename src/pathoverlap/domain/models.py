from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ParamRule(str, Enum):
    """Which side of a comparison may treat `{...}` segments as wildcards."""

    EXISTING = "existing"    # only the already-registered route
    SYMMETRIC = "symmetric"  # either route


class MethodScope(str, Enum):
    ANY = "any"        # shape overlap alone is reported
    SHARED = "shared"  # pairs must also declare at least one common method


class SpecDocument(BaseModel):
    """The slice of a Swagger/OpenAPI document the index is built from.

    Only `paths` is required; everything else in the document is carried
    along untouched and never inspected.
    """

    model_config = ConfigDict(extra="allow")

    paths: dict[str, dict[str, Any]]


@dataclass(frozen=True)
class Endpoint:
    path: str                   # normalized, unique within an index
    methods: tuple[str, ...]    # as declared, first-seen order, no duplicates


@dataclass(frozen=True)
class OverlapRecord:
    path1: str
    path2: str

    def as_dict(self) -> dict[str, str]:
        return {"path1": self.path1, "path2": self.path2}

"""Configuration for pathoverlap runs.

Settings can live in a small YAML file and are overridden by command-line
flags. Every field has a default, so a missing file is not an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from pathoverlap.domain.errors import ConfigError
from pathoverlap.domain.models import MethodScope, ParamRule


class OverlapConfig(BaseModel):
    """Artifact locations, fetch timeout and overlap policies."""

    output_dir: str = Field(default="output", description="Where the endpoint tree is written")
    download_dir: str = Field(default="download", description="Where a downloaded document is written")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds for URL sources")

    single_rule: ParamRule = Field(
        default=ParamRule.EXISTING,
        description="Parameter rule for checking one candidate route",
    )
    scan_rule: ParamRule = Field(
        default=ParamRule.SYMMETRIC,
        description="Parameter rule for scanning declared routes against each other",
    )
    fold_method_case: bool = Field(
        default=False,
        description="Compare declared methods case-insensitively",
    )
    method_scope: MethodScope = Field(
        default=MethodScope.ANY,
        description="Whether a scan requires overlapping routes to share a method",
    )

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "OverlapConfig":
        """Load configuration from a YAML file, or return defaults."""
        if not config_path:
            return cls()

        path = Path(config_path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data: Dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping of settings")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"{path}: {e}") from e

    def with_overrides(self, **overrides: Any) -> "OverlapConfig":
        """Copy with the given fields replaced; None values are ignored."""
        update = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=update)

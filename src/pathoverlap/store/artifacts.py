from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pathoverlap.index.endpoint_index import EndpointIndex

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes optional side outputs of a run.

    Layout (relative to base_dir):
      <output_dir>/endpoints.json   path -> [methods]
      <download_dir>/swagger.json   a document downloaded from a URL, re-serialized as JSON
    """

    ENDPOINTS_FILE = "endpoints.json"
    DOCUMENT_FILE = "swagger.json"

    def __init__(self, base_dir: Path, output_dir: str = "output", download_dir: str = "download"):
        self.base_dir = base_dir
        self.output_dir = output_dir
        self.download_dir = download_dir

    @property
    def endpoints_path(self) -> Path:
        return self.base_dir / self.output_dir / self.ENDPOINTS_FILE

    @property
    def document_path(self) -> Path:
        return self.base_dir / self.download_dir / self.DOCUMENT_FILE

    def save_endpoints(self, index: EndpointIndex) -> Path:
        return self._write_json(self.endpoints_path, index.to_tree())

    def save_document(self, document: Any) -> Path:
        return self._write_json(self.document_path, document)

    def _write_json(self, out_path: Path, payload: Any) -> Path:
        # YAML sources can carry dates and timestamps; they are written as their str() form
        text = json.dumps(payload, indent=2, default=str)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {out_path}")
        return out_path

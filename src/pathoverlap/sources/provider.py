"""Acquisition of the raw specification document.

Providers return the whole parsed document in a single synchronous call.
Every failure (network, filesystem, parse) is raised as DocumentSourceError
so the caller can abort before any index is built.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

import httpx
import yaml

from pathoverlap.domain.errors import DocumentSourceError

logger = logging.getLogger(__name__)


class DocumentProvider(Protocol):
    source: str
    remote: bool  # True when fetch() downloads the document

    def fetch(self) -> Any:
        ...


def _parse_document(text: str, source: str, prefer_yaml: bool = False) -> Any:
    """Parse JSON, falling back to YAML (a superset for our purposes)."""
    if not prefer_yaml:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.debug(f"{source} is not JSON, trying YAML")

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentSourceError(source, f"could not parse document: {e}") from e


class FileDocumentProvider:
    """Reads a JSON or YAML document from disk."""

    remote = False

    def __init__(self, file_path: str):
        self.path = Path(file_path).expanduser()
        self.source = str(self.path)

    def fetch(self) -> Any:
        logger.info(f"Reading specification from {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentSourceError(self.source, f"could not read file: {e}") from e

        prefer_yaml = self.path.suffix.lower() in (".yaml", ".yml")
        return _parse_document(text, self.source, prefer_yaml=prefer_yaml)


class UrlDocumentProvider:
    """Downloads a Swagger/OpenAPI document over HTTP(S)."""

    remote = True

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.source = url
        self.timeout = timeout
        self._client = client

    def fetch(self) -> Any:
        logger.info(f"Fetching specification from {self.url}")
        client = self._client or httpx.Client(timeout=self.timeout, follow_redirects=True)
        try:
            response = client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DocumentSourceError(
                self.source, f"HTTP {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise DocumentSourceError(self.source, f"request failed: {e}") from e
        except httpx.InvalidURL as e:
            raise DocumentSourceError(self.source, f"invalid URL: {e}") from e
        finally:
            if self._client is None:
                client.close()

        logger.debug(f"Fetched {len(response.content)} bytes from {self.url}")
        return _parse_document(response.text, self.source)


def provider_for(
    url: Optional[str] = None,
    file_path: Optional[str] = None,
    timeout: float = 30.0,
) -> DocumentProvider:
    """Pick a provider; a URL wins over a file when both are given."""
    if url:
        return UrlDocumentProvider(url, timeout=timeout)
    if file_path:
        return FileDocumentProvider(file_path)
    raise DocumentSourceError("<none>", "URL or file path is required")

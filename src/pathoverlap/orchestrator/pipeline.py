from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from pathoverlap.config import OverlapConfig
from pathoverlap.detect.overlap import check_all, check_single
from pathoverlap.domain.models import OverlapRecord
from pathoverlap.index.endpoint_index import EndpointIndex, build_index
from pathoverlap.sources.provider import DocumentProvider
from pathoverlap.store.artifacts import ArtifactWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    source: str
    document: Any
    index: EndpointIndex
    saved: list[str]


@dataclass(frozen=True)
class CheckResult:
    source: str
    path: str
    method: Optional[str]
    overlapping_path: Optional[str]
    endpoints_indexed: int
    saved: list[str]

    @property
    def overlaps(self) -> bool:
        return self.overlapping_path is not None


@dataclass(frozen=True)
class ScanResult:
    source: str
    overlaps: list[OverlapRecord]
    endpoints_indexed: int
    saved: list[str]


def load_index(
    provider: DocumentProvider,
    config: OverlapConfig,
    base_dir: Path,
    save_document: bool = False,
    save_tree: bool = False,
) -> LoadResult:
    """Fetch the document once, build the index, then write requested artifacts.

    Only a downloaded document is saved; a local file already is its own copy.
    """
    document = provider.fetch()
    index = build_index(document)
    logger.info(f"Indexed {len(index)} paths from {provider.source}")

    writer = ArtifactWriter(base_dir, output_dir=config.output_dir, download_dir=config.download_dir)
    saved: list[str] = []
    if save_document and provider.remote:
        saved.append(str(writer.save_document(document)))
    elif save_document:
        logger.debug(f"Not saving {provider.source}: it was read from disk")
    if save_tree:
        saved.append(str(writer.save_endpoints(index)))

    return LoadResult(source=provider.source, document=document, index=index, saved=saved)


def run_check(
    provider: DocumentProvider,
    path: str,
    method: Optional[str],
    config: Optional[OverlapConfig] = None,
    base_dir: Path = Path("."),
    save_document: bool = False,
    save_tree: bool = False,
) -> CheckResult:
    config = config or OverlapConfig()
    loaded = load_index(provider, config, base_dir, save_document=save_document, save_tree=save_tree)

    hit = check_single(
        path,
        method,
        loaded.index,
        rule=config.single_rule,
        fold_method_case=config.fold_method_case,
    )
    logger.debug(f"check {method} {path} -> {hit}")

    return CheckResult(
        source=loaded.source,
        path=path,
        method=method,
        overlapping_path=hit,
        endpoints_indexed=len(loaded.index),
        saved=loaded.saved,
    )


def run_scan(
    provider: DocumentProvider,
    config: Optional[OverlapConfig] = None,
    base_dir: Path = Path("."),
    save_document: bool = False,
    save_tree: bool = False,
) -> ScanResult:
    config = config or OverlapConfig()
    loaded = load_index(provider, config, base_dir, save_document=save_document, save_tree=save_tree)

    overlaps = check_all(loaded.index, rule=config.scan_rule, method_scope=config.method_scope)
    logger.info(f"Found {len(overlaps)} overlapping pairs")

    return ScanResult(
        source=loaded.source,
        overlaps=overlaps,
        endpoints_indexed=len(loaded.index),
        saved=loaded.saved,
    )

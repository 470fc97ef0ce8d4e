from __future__ import annotations


class PathOverlapError(Exception):
    """Base class for errors raised by pathoverlap."""


class MalformedDocumentError(PathOverlapError):
    """The specification document has no usable `paths` collection."""


class DocumentSourceError(PathOverlapError):
    """The specification document could not be fetched, read or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class ConfigError(PathOverlapError):
    """A settings file exists but cannot be used."""

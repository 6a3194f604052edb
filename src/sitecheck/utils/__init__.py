"""Shared filesystem helpers."""

from sitecheck.utils.documents import DOCUMENT_SUFFIXES, PathLike, load_document

__all__ = ["DOCUMENT_SUFFIXES", "PathLike", "load_document"]

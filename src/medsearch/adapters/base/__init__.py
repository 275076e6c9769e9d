"""Base source interface — Abstract classes for collection adapters."""

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.adapters.base.registry import SourceRegistry

__all__ = ["CollectionSource", "SourceRegistry"]

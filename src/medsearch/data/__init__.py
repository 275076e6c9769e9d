"""Seed catalogue loading."""

from medsearch.data.loader import Catalog, load_catalog

__all__ = ["Catalog", "load_catalog"]

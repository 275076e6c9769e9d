"""MedSearch Python SDK — Client library for the MedSearch API.

Quick start::

    from medsearch.client import MedSearchClient

    client = MedSearchClient("http://localhost:8080")
    response = client.search("rinoplastia", types=["case", "article"])
    suggestions = client.suggest("rino")
"""

from medsearch.client.client import AsyncMedSearchClient, MedSearchClient

__all__ = ["AsyncMedSearchClient", "MedSearchClient"]

"""MedSearch — Federated search and ranking over clinical cases, articles, courses and archive entries."""

__version__ = "0.1.0"

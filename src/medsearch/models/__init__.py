"""Data models for records, queries, results and responses."""

"""Core search pipeline: scoring, filtering, ranking and suggestions."""

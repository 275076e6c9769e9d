"""Library article source."""

"""Academy course source."""

"""Clinical case source."""

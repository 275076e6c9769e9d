"""Archive entry source."""

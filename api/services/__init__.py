"""Route planning service."""

"""Infrastructure layer - persistence and metrics."""

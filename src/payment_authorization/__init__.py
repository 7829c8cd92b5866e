"""Payment authorization service."""

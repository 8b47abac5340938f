"""Command grammar, error taxonomy, replies and shared application state."""

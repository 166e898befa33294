"""Domain utilities."""

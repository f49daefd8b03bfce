"""Infrastructure adapters for the pair value type."""

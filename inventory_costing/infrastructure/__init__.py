"""Infrastructure adapters - storage implementations."""

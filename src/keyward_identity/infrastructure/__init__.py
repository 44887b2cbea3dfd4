"""Infrastructure adapters for keyward_identity."""

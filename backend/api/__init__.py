"""HTTP view over the wall service."""

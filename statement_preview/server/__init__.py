"""HTTP preview service."""

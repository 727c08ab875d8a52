"""Infrastructure: persistence, cache."""

"""Color model, distance and contrast-safe adjustment."""

"""Infrastructure layer: MongoDB repositories and external service clients."""

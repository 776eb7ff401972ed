"""Domain layer: entities, repository contracts and exceptions. No framework imports."""

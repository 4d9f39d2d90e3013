"""Domain layer: value objects, ports and the correlation core."""

"""Domain layer: entities and pure services, free of I/O."""

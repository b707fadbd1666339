"""Infrastructure layer: adapters, configuration and scheduling."""

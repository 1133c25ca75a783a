"""Infrastructure layer: persistence, HTTP and identity adapters."""

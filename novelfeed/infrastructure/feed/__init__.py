"""Feed HTTP adapters."""

"""Reading progress HTTP adapters."""

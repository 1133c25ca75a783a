"""Reading application module."""

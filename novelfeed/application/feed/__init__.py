"""Feed application module."""

"""Application layer: store protocol, enrichment service and use cases."""

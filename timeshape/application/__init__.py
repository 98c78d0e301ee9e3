"""Application layer: ports implemented by the infrastructure adapters."""

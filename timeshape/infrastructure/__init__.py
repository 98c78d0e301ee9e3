"""Infrastructure layer for timeshape.

This layer contains adapters for the ambient environment (clock, host
timezone) and for logging. It implements the ports defined in the
application layer.
"""

__all__ = []

"""Domain services.

Business logic that operates on domain entities.
"""

"""Core business logic layer.

Subpackages:
- generation: week partitioning, ingredient rotations, meal composition, plan generation and merging
- planning: month-level flows (generate, preview, single suggestion) used by the host application
- shopping: ingredient counts aggregated from the week plans

Nothing in this layer performs I/O; persistence and transport belong to the caller.
"""
__all__ = ["generation", "planning", "shopping"]

"""Core business logic layer.

Subpackages:
- grocery: recipe scaling and ingredient aggregation
- planning: meal plan creation and grocery lists
- retail: retailer catalog search and cart staging
- shopping: meal plan to cart bridge
"""
__all__ = ["grocery", "planning", "retail", "shopping"]

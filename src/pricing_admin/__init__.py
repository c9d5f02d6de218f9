"""
Pricing Admin Package

A small catalog-and-pricing admin tool. Browse products, drill into variants,
and manage quantity-based price tiers for each variant.
"""

__version__ = "1.0.0"

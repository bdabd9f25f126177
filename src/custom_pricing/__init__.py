"""
Custom Pricing Package

Backend proxy for custom-length products.
Resolves Length → Tier → Price and pushes the price to a Shopify variant.
"""

__version__ = "1.1.0"

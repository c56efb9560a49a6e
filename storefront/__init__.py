"""
Storefront API - products from a KV namespace, orders in SQL
"""
__version__ = "1.0.0"

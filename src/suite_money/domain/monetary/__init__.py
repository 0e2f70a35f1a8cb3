"""Monetary domain package.

This package contains Currency definitions, the predefined ISO-4217 currency
registry and the Money value type: an immutable integer count of minor units
with currency-checked arithmetic and remainder-preserving allocation.
"""

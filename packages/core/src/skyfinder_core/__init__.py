"""Skyfinder domain logic: suggestion grouping, caching, sorting and geo helpers."""

"""Incremental computation nodes for a social network top-posts query, with small numeric, sequence and order-book examples."""

__version__ = "0.1.0"
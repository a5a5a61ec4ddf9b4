"""
Adapters package - External service connections.
"""

from adapters import northwind_adapter

__all__ = [
    "northwind_adapter",
]

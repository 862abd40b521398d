"""
Shrimp Pricing Package

Contract pricing for shrimp by size (pieces per pound).
Resolves prices using Exact → Interpolated → Penalty pipeline over a GM-entered base table.
"""

__version__ = "1.0.0"

"""
Pathfinder 2e grid rules shared by every client.

This package contains grid types, distance measurement and effect-area highlighting.
"""

"""Domain layer — graph store, errors, and graph algorithms.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

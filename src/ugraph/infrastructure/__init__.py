"""Infrastructure layer — adapters between domain graphs and third-party libs.

This layer depends on the domain graph types and NetworkX.
It must never import from services, commands, config, or output.
"""

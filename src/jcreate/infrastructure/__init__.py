"""Infrastructure layer: project discovery and filesystem access.

This layer depends on the standard library and the domain layer.
It must never import from services, commands, or output.
"""

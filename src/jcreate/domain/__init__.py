"""Domain layer: kinds, identifier rules, and pure rendering.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""

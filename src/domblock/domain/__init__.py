"""Domain layer: domain names, the suffix index, and input errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

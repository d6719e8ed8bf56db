"""Domain layer — string, collection, type and template helpers.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

"""Domain layer: the task entity, IDs, and store outcomes.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

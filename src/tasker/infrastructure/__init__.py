"""Infrastructure layer: database engine, schema, and the task store.

This layer depends on stdlib and third-party libs (SQLAlchemy, pydantic).
It may import domain types to decode rows, but must never import from
services, commands, or output.
"""

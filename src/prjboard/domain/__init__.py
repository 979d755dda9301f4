"""Domain layer — types, ids, models, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from state, views, infrastructure, commands, or config.
"""

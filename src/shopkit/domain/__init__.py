"""Domain layer: rules, value types, and containers.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

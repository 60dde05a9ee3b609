"""Domain layer — date types, calendar rules, and validators.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""

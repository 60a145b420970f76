"""Domain layer — request types, student and document values, issuance rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

"""Domain layer — calendar arithmetic, validated components, dates and ranges.

This layer depends only on stdlib and pydantic.
It must never import from config.
"""

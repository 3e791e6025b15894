"""Domain layer: the Score type and its JSON codec.

This layer depends only on stdlib and pydantic.
It must never import from services, output, config, or the CLI.
"""

"""Domain layer: mapping document, settings model, and the parse pipeline.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""

"""Domain layer — rules, date arithmetic, formatting, and selector state.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""

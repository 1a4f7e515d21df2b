"""Domain layer — YearMonth, parsing capability, and civil-time helpers.

This layer depends only on stdlib, pydantic-core, and python-dateutil.
It must never import from services, commands, output, or config.
"""

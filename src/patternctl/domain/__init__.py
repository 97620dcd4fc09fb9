"""Domain layer — the pattern participants themselves.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""

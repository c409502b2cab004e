"""Domain layer — predicates and the flatten algorithm.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""

"""Domain layer — directions, commands, and the dial state machine.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

"""
Configuration module.

Frozen dataclass defaults, YAML overrides and validation for the bid
loader, logging and CLI.
"""

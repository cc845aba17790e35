"""Declarative package, dotfile and script provisioning from JSONC configuration."""

__version__ = "0.1.0"
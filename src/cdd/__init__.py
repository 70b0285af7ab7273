"""Context-driven development workspace bootstrapper and task launcher."""

__version__ = "0.4.0"

"""Resource name handling and request validation helpers for resource-oriented APIs."""

__version__ = "0.1.0"
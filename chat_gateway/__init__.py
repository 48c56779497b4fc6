"""Request normalization and dispatch stage of a multi-provider chat gateway."""

__version__ = "1.0.0"

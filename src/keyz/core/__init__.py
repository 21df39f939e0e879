"""Core keyz types, configuration and errors."""

from .key import Key

__all__ = ["Key"]

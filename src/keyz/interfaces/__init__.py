"""Protocols implemented by keyz components."""

from .builder import Builder

__all__ = ["Builder"]

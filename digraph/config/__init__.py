"""Configuration schema for digraph."""

from .schema import GraphConfig

__all__ = ["GraphConfig"]

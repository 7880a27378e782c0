"""Deterministic grouping and ordering of import blocks in Go source files."""

__version__ = "0.12.1"
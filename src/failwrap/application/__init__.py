"""Annotators and the wrap operation."""

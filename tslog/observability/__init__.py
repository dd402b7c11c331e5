"""Observability helpers for tslog."""

"""Presentation helpers for parsed dumps."""

"""Utility helpers for podlocate."""

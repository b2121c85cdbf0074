"""Utility helpers shared by flows."""

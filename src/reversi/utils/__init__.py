"""Utility helpers: configuration and player factory."""

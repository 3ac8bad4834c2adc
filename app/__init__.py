"""Gym check-in application package."""

__all__ = []

"""Numerical helpers for the environment models."""

from .legendre import legendre_schmidt

__all__ = ['legendre_schmidt']

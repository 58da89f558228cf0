"""
Toolbox Exceptions
==================

Errors and warnings raised by the environment models.
"""


class DomainError(ValueError):
    """Input outside the validity domain of a model."""


class AccuracyAdvisory(UserWarning):
    """Result computed with reduced accuracy (e.g. secular extrapolation)."""

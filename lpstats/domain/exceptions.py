from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidSnapshotError(DomainError):
    """Snapshot has a non-positive reserve where a ratio needs it."""


class InvalidSeriesError(DomainError):
    """Snapshot series is unordered, duplicated or mismatched with its pairs."""


class InvalidPeriodError(DomainError):
    """Period granularity is not supported."""


class LPStatsInputError(DomainError):
    """Invalid parameters for LP stats."""


class InvalidReferencePriceError(DomainError):
    """Reference asset price must be positive."""


class ReferencePriceUnavailableError(DomainError):
    """No reference asset price could be resolved."""

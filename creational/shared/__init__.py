"""Shared models and errors."""

from .errors import (
    CreationalError,
    ConstructionFailure,
    VariantMismatchError,
    UnknownVariantError,
    OwnershipError,
    PoolExhaustedError,
)
from .models import ClientReport, ClientRun

__all__ = [
    "CreationalError",
    "ConstructionFailure",
    "VariantMismatchError",
    "UnknownVariantError",
    "OwnershipError",
    "PoolExhaustedError",
    "ClientReport",
    "ClientRun",
]

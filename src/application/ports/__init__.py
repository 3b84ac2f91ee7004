"""Application ports package."""

from .database import DatabaseEnginePort
from .purchasing_repository import PurchasingRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "PurchasingRepositoryPort",
]

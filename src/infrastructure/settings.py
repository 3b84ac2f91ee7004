"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import (
    DEFAULT_PURCHASE_ITEMS_LIMIT,
    DEFAULT_PURCHASES_LIMIT,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class PurchasingSettings:
    """Settings for selecting the purchasing data source.

    Attributes:
        backend: Backend identifier (sqlalchemy or snapshot).
        snapshot_file: Optional path to a JSON snapshot of records.
        purchases_limit: Maximum purchases fetched per snapshot.
        items_limit: Maximum purchase items fetched per snapshot.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path] = None
    purchases_limit: int = DEFAULT_PURCHASES_LIMIT
    items_limit: int = DEFAULT_PURCHASE_ITEMS_LIMIT

    @classmethod
    def from_env(cls) -> "PurchasingSettings":
        """Build settings from environment variables.

        Returns:
            PurchasingSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = os.getenv("PURCHASING_BACKEND", "sqlalchemy").strip().lower()
        raw_snapshot = os.getenv("PURCHASING_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        return cls(
            backend=backend,
            snapshot_file=snapshot_file,
            purchases_limit=cls._read_limit(
                "PURCHASES_FETCH_LIMIT",
                DEFAULT_PURCHASES_LIMIT,
                logger=logger,
            ),
            items_limit=cls._read_limit(
                "PURCHASE_ITEMS_FETCH_LIMIT",
                DEFAULT_PURCHASE_ITEMS_LIMIT,
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the snapshot file path or file:// URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Snapshot file does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set PURCHASING_SNAPSHOT_FILE to choose one."
            )
        return None

    @staticmethod
    def _read_limit(name: str, default: int, logger) -> int:
        raw_value = os.getenv(name)
        if not raw_value:
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(f"Invalid {name}={raw_value!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value


__all__ = ["PurchasingSettings"]

"""Configuration: Centralized paths and settings.

This module provides:
- DataPaths: File paths for matched trades and stored snapshots
- AnalysisConfig: Parameters for the analytics engine

Directory Structure:
    data/
    ├── matched_trades/          # Matched trades (by user)
    │   ├── user_123.parquet
    │   └── ...
    └── snapshots/               # Precomputed 1y snapshots (by user)
        ├── user_123.json
        └── ...
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DataPaths:
    """File paths for data sources.

    Attributes:
        root: Project root directory
    """

    root: Path = Path(".")

    # --- Directories ---

    @property
    def data_dir(self) -> Path:
        """Main data directory."""
        return self.root / "data"

    @property
    def matched_trades_dir(self) -> Path:
        """Matched trades (by user)."""
        return self.data_dir / "matched_trades"

    @property
    def snapshots_dir(self) -> Path:
        """Precomputed analytics snapshots (by user)."""
        return self.data_dir / "snapshots"

    # --- Helper Methods ---

    def user_trades_path(self, user_id: str) -> Path:
        """Path to a user's matched trades."""
        return self.matched_trades_dir / f"{user_id}.parquet"

    def user_snapshot_path(self, user_id: str) -> Path:
        """Path to a user's stored snapshot."""
        return self.snapshots_dir / f"{user_id}.json"

    def list_users(self) -> list[str]:
        """List all users with matched trade data."""
        if not self.matched_trades_dir.exists():
            return []
        return sorted(p.stem for p in self.matched_trades_dir.glob("*.parquet"))

    def validate(self) -> list[str]:
        """Check which required paths are missing.

        Returns:
            List of missing paths (empty if all exist)
        """
        missing = []

        if not self.matched_trades_dir.exists():
            missing.append(str(self.matched_trades_dir))

        return missing

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.matched_trades_dir.mkdir(parents=True, exist_ok=True)
        self.snapshots_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for the analytics engine.

    Attributes:
        default_period: Period whose snapshot may be served precomputed
        histogram_bins: Number of profit/loss histogram bins
        top_symbols: Symbols kept in the per-symbol breakdown
        flat_trade_policy: Streak handling of zero-profit trades
            ("neutral" or "reset")
        snapshot_cache_ttl: Seconds a stored snapshot stays cached
    """

    default_period: str = "1y"
    histogram_bins: int = 10
    top_symbols: int = 10
    flat_trade_policy: str = "neutral"
    snapshot_cache_ttl: float = 300.0


# Default instances
DEFAULT_PATHS = DataPaths()
DEFAULT_CONFIG = AnalysisConfig()

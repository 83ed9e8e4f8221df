"""Runtime configuration for the Flight Atlas project."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoragePaths:
    """Collection of filesystem paths used by the application."""

    uploads: Path
    outputs: Path

    def ensure(self) -> None:
        """Ensure the backing directories exist."""
        self.uploads.mkdir(parents=True, exist_ok=True)
        self.outputs.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AppConfig:
    """High level runtime configuration values."""

    max_flight_log_size_mb: int = 20
    allowed_flight_log_extensions: tuple[str, ...] = ("csv",)
    max_path_points: int = 1000

    @property
    def max_upload_bytes(self) -> int:
        """Maximum upload payload in bytes."""
        return self.max_flight_log_size_mb * 1024 * 1024


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for the Redis-backed task queue."""

    redis_url: str = "redis://localhost:6379/0"
    queue_name: str = "flight-atlas"
    default_timeout: int = 60 * 10  # seconds


@dataclass(frozen=True)
class RouteEngineConfig:
    """Zoom thresholds and path geometry constants for the route engine."""

    # zoom > pass_through_zoom keeps every route; zoom > city_zoom buckets
    # by city pair; anything lower buckets by country pair.
    pass_through_zoom: float = 8
    city_zoom: float = 4
    default_path_points: int = 100
    # central angle in radians below which two points are treated as equal
    degenerate_angle: float = 1e-4
    arc_divisor: float = 10.0
    arc_max_strength: float = 5.0
    arc_max_distance_miles: int = 1000


@dataclass(frozen=True)
class CarbonConfig:
    """Calibration table for the carbon footprint estimate."""

    km_per_mile: float = 1.60934
    # (upper bound in km, kg CO2 per passenger km); distances at or beyond
    # the last bound use long_haul_factor
    emission_bands: tuple[tuple[float, float], ...] = ((500, 0.255), (3000, 0.156))
    long_haul_factor: float = 0.139
    efficient_aircraft: tuple[str, ...] = ("787", "A350")
    efficient_multiplier: float = 0.85
    inefficient_aircraft: tuple[str, ...] = ("747", "A380")
    inefficient_multiplier: float = 1.15
    radiative_forcing: float = 1.9
    price_per_tonne: float = 15.0  # USD
    minimum_offset_cost: float = 0.50


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure root logging and return the package logger."""

    level = level or os.environ.get("FLIGHT_ATLAS_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("flight_atlas")


APP_CONFIG = AppConfig()
ROUTE_ENGINE_CONFIG = RouteEngineConfig()
CARBON_CONFIG = CarbonConfig()
STORAGE_PATHS = StoragePaths(
    uploads=Path(os.environ.get("FLIGHT_ATLAS_UPLOADS", "uploads")),
    outputs=Path(os.environ.get("FLIGHT_ATLAS_OUTPUTS", "outputs")),
)
QUEUE_CONFIG = QueueConfig(
    redis_url=os.environ.get("FLIGHT_ATLAS_REDIS_URL", QueueConfig.redis_url),
    queue_name=os.environ.get("FLIGHT_ATLAS_QUEUE", QueueConfig.queue_name),
    default_timeout=int(
        os.environ.get("FLIGHT_ATLAS_QUEUE_TIMEOUT", QueueConfig.default_timeout)
    ),
)

STORAGE_PATHS.ensure()

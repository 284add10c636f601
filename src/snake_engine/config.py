"""Game and driver configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_engine.engine import DEFAULT_GRID_SIZE, INITIAL_SNAKE_LENGTH
from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import BoundaryMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the game drivers.

    Supports JSON serialization so a setup can be replayed.
    """

    mode: str = BoundaryMode.WALLS.value
    grid_size: int = DEFAULT_GRID_SIZE
    tick_interval_ms: int = 150

    # Spectator games
    spectator_grid_size: int = 15
    spectator_tick_interval_ms: int = 200

    seed: int | None = None

    def __post_init__(self) -> None:
        # Normalises aliases such as "passthrough".
        object.__setattr__(self, "mode", BoundaryMode.parse(self.mode).value)
        min_size = 2 * INITIAL_SNAKE_LENGTH - 1
        if self.grid_size < min_size or self.spectator_grid_size < min_size:
            raise InvalidArgumentError(
                f"Grid sizes must be at least {min_size}."
            )
        if self.tick_interval_ms <= 0 or self.spectator_tick_interval_ms <= 0:
            raise InvalidArgumentError("Tick intervals must be positive.")

    @property
    def boundary_mode(self) -> BoundaryMode:
        return BoundaryMode(self.mode)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        try:
            raw = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as exc:
            raise InvalidArgumentError(f"Cannot read config file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise InvalidArgumentError(f"Invalid config file {path}: expected an object.")
        try:
            return cls(**raw)
        except TypeError as exc:
            raise InvalidArgumentError(f"Invalid config file {path}: {exc}") from exc

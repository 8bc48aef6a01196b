"""Match configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

from broadside.game.app.board_layout import BoardLayout
from broadside.game.core.fleet import DEFAULT_FLEET_LENGTHS
from broadside.game.core.models import BOARD_SIZE


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Host-supplied match setup."""

    board_size: int = BOARD_SIZE
    fleet_one: tuple[int, ...] = DEFAULT_FLEET_LENGTHS
    fleet_two: tuple[int, ...] = DEFAULT_FLEET_LENGTHS
    layout: BoardLayout = field(default_factory=BoardLayout)
    auto_game_over: bool = False

    def __post_init__(self) -> None:
        if self.board_size < 1:
            raise ValueError(f"board_size must be positive, got {self.board_size}.")
        for name, lengths in (("fleet_one", self.fleet_one), ("fleet_two", self.fleet_two)):
            if not lengths:
                raise ValueError(f"{name} must contain at least one ship.")
            for length in lengths:
                if not 1 <= length <= self.board_size:
                    raise ValueError(
                        f"{name} ship length {length} does not fit a {self.board_size}x{self.board_size} board."
                    )
        if self.layout.board_size != self.board_size:
            object.__setattr__(self, "layout", replace(self.layout, board_size=self.board_size))


def load_match_config() -> MatchConfig:
    """Build match configuration from ``BROADSIDE_*`` environment variables."""
    board_size = _int("BROADSIDE_BOARD_SIZE", BOARD_SIZE)
    return MatchConfig(
        board_size=board_size,
        fleet_one=_lengths("BROADSIDE_FLEET_1", DEFAULT_FLEET_LENGTHS),
        fleet_two=_lengths("BROADSIDE_FLEET_2", DEFAULT_FLEET_LENGTHS),
        layout=BoardLayout(
            board_size=board_size,
            cell_spacing=_float("BROADSIDE_CELL_SPACING", 0.1),
        ),
        auto_game_over=_flag("BROADSIDE_AUTO_GAME_OVER"),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order: appdata/config/.env, appdata/config/.env.local,
    .env, .env.local.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc


def _lengths(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    try:
        return tuple(int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"{name} must be comma-separated ship lengths, got {raw!r}.") from exc

"""Loading levels from YAML files."""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, Union

import yaml

from .formation import Formation, FormationType
from .level import Level, SpawnEvent

logger = logging.getLogger(__name__)

_LEVEL_FILE = re.compile(r"level_(\d+)\.yaml")
_BENCHMARK_FILE = "benchmark.yaml"

T = TypeVar("T")
PathLike = Union[str, Path]


def formation_type_from_string(text: str) -> FormationType:
    """Parse a formation type name, ignoring case."""
    try:
        return FormationType[text.upper()]
    except KeyError:
        raise ValueError(f"Unrecognized formation type: '{text}'") from None


def _node(parent: Any, key: str) -> Any:
    if not isinstance(parent, dict):
        raise TypeError(f"expected a mapping holding '{key}'")
    if key not in parent:
        raise KeyError(key)
    return parent[key]


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(f"expected an integer, got {value!r}")


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("expected a number, got a boolean")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError(f"expected a number, got {value!r}")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeError(f"expected a boolean, got {value!r}")


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    raise TypeError(f"expected a scalar, got {value!r}")


def _get(parent: Any, key: str, convert: Callable[[Any], T]) -> T:
    return convert(_node(parent, key))


def _get_or(parent: Any, key: str, convert: Callable[[Any], T], default: T) -> T:
    try:
        return convert(_node(parent, key))
    except (KeyError, TypeError, ValueError):
        return default


def _clone(prototype: Any) -> Any:
    clone = getattr(prototype, "clone", None)
    if callable(clone):
        return clone()
    return copy.deepcopy(prototype)


class LevelLoader:
    """Reads level files and builds ``Level`` objects.

    Each spawn event receives its own copy of ``enemy_prototype``. Positions
    in the files are ratios of the screen size.
    """

    def __init__(self, enemy_prototype: Any = None) -> None:
        self.enemy_prototype = enemy_prototype
        self.screen_width = 0
        self.screen_height = 0
        self.min_x = 0
        self.max_x = 0
        self.min_y = 0
        self.max_y = 0

    def set_screen_size(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def set_position_constraints(
        self, minimum: Tuple[int, int], maximum: Tuple[int, int]
    ) -> None:
        self.min_x, self.min_y = minimum
        self.max_x, self.max_y = maximum

    def load_level(self, path: PathLike) -> Level:
        """Load one level; an unreadable or invalid file gives an empty ``Level``."""
        path = Path(path)
        logger.debug("loading level: %s", path.name)
        try:
            with path.open("r", encoding="utf-8") as handle:
                config = yaml.safe_load(handle)
            return self._parse_level(config)
        except Exception as exc:
            logger.error("Failed to load level from file: %s\nReason: %s", path, exc)
            return Level()

    def load_levels(self, directory: Optional[PathLike] = None) -> Dict[int, Level]:
        """Load every ``level_<n>.yaml`` in ``directory``, keyed by level number."""
        root = Path(directory) if directory is not None else Path.cwd() / "levels"
        logger.debug("Attempting to load levels from path: %s", root)
        levels: Dict[int, Level] = {}
        if not root.is_dir():
            return levels
        for entry in sorted(root.iterdir()):
            if not _LEVEL_FILE.fullmatch(entry.name):
                continue
            level = self.load_level(entry)
            if level.level_number >= 0 and level.name:
                levels[level.level_number] = level
            else:
                logger.warning("Level file %s is invalid and was skipped.", entry.name)
        return dict(sorted(levels.items()))

    def load_benchmark_level(self, directory: Optional[PathLike] = None) -> Level:
        """Load ``benchmark.yaml`` (any case) from ``directory``."""
        root = Path(directory) if directory is not None else Path.cwd() / "levels"
        logger.debug("Looking for benchmark.yaml in path: %s", root)
        if root.is_dir():
            for entry in sorted(root.iterdir()):
                if entry.name.lower() != _BENCHMARK_FILE:
                    continue
                level = self.load_level(entry)
                if level.name:
                    return level
                logger.warning("benchmark.yaml exists but is invalid.")
                break
        logger.warning("benchmark.yaml not found in levels directory.")
        return Level()

    def _parse_level(self, config: Any) -> Level:
        level = Level(
            level_number=_get(config, "Level", _as_int),
            name=_get(config, "Name", _as_str),
            description=_get(config, "Description", _as_str),
            enemy_limit=_get_or(config, "EnemyLimit", _as_int, 1),
        )
        events = config.get("SpawnEvents")
        if events is None:
            return level
        if not isinstance(events, list):
            raise TypeError("SpawnEvents must be a sequence")
        for node in events:
            if not _get_or(node, "Enabled", _as_bool, True):
                continue
            level.spawn_events.append(self._parse_event(node))
        return level

    def _parse_event(self, node: Any) -> SpawnEvent:
        formation_node = _node(node, "Formation")
        spacing_node = _node(formation_node, "Spacing")
        formation = (
            Formation()
            .with_type(formation_type_from_string(_get(formation_node, "Type", _as_str)))
            .with_size(
                _get(formation_node, "Width", _as_int),
                _get(formation_node, "Height", _as_int),
            )
            .with_solidity(_get(formation_node, "Solid", _as_bool))
            .with_spacing(
                (_get(spacing_node, "X", _as_int), _get(spacing_node, "Y", _as_int))
            )
        )

        position = _node(node, "Position")
        if not isinstance(position, dict):
            raise TypeError("Position must be a mapping")
        if "Min" in position and "Max" in position:
            lower = self._scaled(_node(position, "Min"))
            upper = self._scaled(_node(position, "Max"))
        else:
            lower = self._scaled(position)
            upper = lower

        event = (
            SpawnEvent()
            .with_count(_get(node, "Count", _as_int))
            .with_trigger_time(_get(node, "Time", _as_int))
            .with_interval(_get(node, "IntervalMs", _as_int))
            .with_position_range(lower, upper)
            .with_formation(formation)
        )
        if self.enemy_prototype is not None:
            event.with_game_object(_clone(self.enemy_prototype))
        return event

    def _scaled(self, node: Any) -> Tuple[int, int]:
        x_ratio = _get(node, "X", _as_float)
        y_ratio = _get(node, "Y", _as_float)
        return int(x_ratio * self.screen_width), int(y_ratio * self.screen_height)
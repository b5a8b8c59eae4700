from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, fields, replace
from numbers import Integral
from typing import Any, Dict, Tuple

from .errors import InvalidParameter
from .noise import NOISE_KINDS, check_seed
from .safe_parse import to_float, to_int, to_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapConfig:
    """Settings for one generated map.

    Grid shape and hex size feed the grid builder; the noise settings and
    thresholds feed terrain classification.  ``offset`` shifts the sampled
    region of the noise field and ``seed`` picks the field itself, so either
    one gives a different but reproducible map.
    """

    # Grid
    radius: int = 10
    hex_size: float = 1.0

    # Noise sampling
    noise_scale: float = 0.1
    offset: Tuple[float, float] = (0.0, 0.0)
    noise: str = "perlin"
    seed: int = 0
    octaves: int = 1
    persistence: float = 0.5
    lacunarity: float = 2.0

    # Terrain thresholds against noise in [0,1]
    water_threshold: float = 0.3
    mountain_threshold: float = 0.7

    def validate(self) -> "MapConfig":
        """Raise :class:`InvalidParameter` for settings generation cannot use."""
        for name in ("radius", "octaves"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidParameter(f"{name} must be an integer, got {value!r}")
        if self.radius < 0:
            raise InvalidParameter(f"radius must be >= 0, got {self.radius}")
        if self.octaves < 1:
            raise InvalidParameter(f"octaves must be >= 1, got {self.octaves}")
        check_seed(self.seed)
        for name in ("hex_size", "noise_scale", "lacunarity", "persistence"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameter(f"{name} must be a positive finite number, got {value}")
        if self.noise not in NOISE_KINDS:
            raise InvalidParameter(
                f"unknown noise kind {self.noise!r}; expected one of {sorted(NOISE_KINDS)}"
            )
        for name in ("water_threshold", "mountain_threshold"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise InvalidParameter(f"{name} must be in [0,1], got {value}")
        if len(self.offset) != 2 or not all(math.isfinite(v) for v in self.offset):
            raise InvalidParameter(f"offset must be two finite numbers, got {self.offset!r}")
        return self

    def with_overrides(self, **changes: Any) -> "MapConfig":
        """Copy with the non-``None`` entries of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["offset"] = list(self.offset)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MapConfig":
        """Build a config from JSON-style data.

        Missing keys keep their defaults.  Values that cannot be coerced fall
        back to the default with a warning, and unknown keys are ignored.
        """
        base = cls()
        known = {f.name for f in fields(cls)}
        unknown = set(data).difference(known)
        if unknown:
            logger.warning("ignoring unknown config keys: %s", sorted(unknown))

        ints = ("radius", "seed", "octaves")
        floats = ("hex_size", "noise_scale", "persistence", "lacunarity",
                  "water_threshold", "mountain_threshold")
        values: Dict[str, Any] = {}
        for name in ints:
            if name in data:
                values[name] = to_int(data[name], getattr(base, name))
        for name in floats:
            if name in data:
                values[name] = to_float(data[name], getattr(base, name))
        if "offset" in data:
            values["offset"] = to_pair(data["offset"], base.offset)
        if "noise" in data:
            values["noise"] = str(data["noise"]).strip().lower()
        return replace(base, **values)


def load_config(path: str) -> MapConfig:
    """Read a :class:`MapConfig` from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidParameter(f"{path}: expected a JSON object, got {type(data).__name__}")
    logger.debug("loaded config from %s", path)
    return MapConfig.from_dict(data)


# Defaults used when no config is supplied
DEFAULT_CONFIG = MapConfig()

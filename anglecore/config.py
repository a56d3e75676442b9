from __future__ import annotations
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import yaml

from .constants import MAX_DECIMALS
from .notation import FORMAT_STYLES

_SECTIONS = {"format", "wrap", "random"}

@dataclass
class FormatConfig:
    style: str = "rad"
    decimals: Optional[int] = None

@dataclass
class WrapConfig:
    signed: bool = True

@dataclass
class RandomConfig:
    seed: Optional[int] = None

@dataclass
class Config:
    format: FormatConfig = field(default_factory=FormatConfig)
    wrap: WrapConfig = field(default_factory=WrapConfig)
    random: RandomConfig = field(default_factory=RandomConfig)


def _section(root: Dict[str, Any], key: str, allowed: set[str]) -> Dict[str, Any]:
    sec = root.get(key, None)
    if sec is None:
        return {}
    if not isinstance(sec, dict):
        raise ValueError(f"{key} must be a mapping")
    extra = sorted(set(sec.keys()) - allowed)
    if extra:
        raise ValueError(f"{key} contains unsupported keys: {extra}")
    return sec


def check_decimals(decimals: Any, key: str = "decimals") -> Optional[int]:
    """Validate a decimals setting; warns when it exceeds float64 resolution."""
    if decimals is None:
        return None
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"{key} must be an integer or null")
    if decimals < 0:
        raise ValueError(f"{key} must be >= 0")
    if decimals > MAX_DECIMALS:
        warnings.warn(
            f"{key}={decimals} exceeds float64 resolution; digits past {MAX_DECIMALS} are noise",
            RuntimeWarning,
        )
    return int(decimals)


def config_from_mapping(d: Optional[Dict[str, Any]]) -> Config:
    if d is None:
        return Config()
    if not isinstance(d, dict):
        raise ValueError("config root must be a mapping")
    unknown = sorted(set(d.keys()) - _SECTIONS)
    if unknown:
        # other tools may share the file; ignore foreign sections
        warnings.warn(f"ignoring unknown config sections: {unknown}", RuntimeWarning)

    fmt = _section(d, "format", {"style", "decimals"})
    style = str(fmt.get("style", "rad")).strip().lower()
    if style not in FORMAT_STYLES:
        raise ValueError(f"format.style must be one of {list(FORMAT_STYLES)}")
    decimals = check_decimals(fmt.get("decimals", None), "format.decimals")

    wr = _section(d, "wrap", {"signed"})
    signed = wr.get("signed", True)
    if not isinstance(signed, bool):
        raise ValueError("wrap.signed must be a boolean")

    rnd = _section(d, "random", {"seed"})
    seed = rnd.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError("random.seed must be an integer or null")

    return Config(
        format=FormatConfig(style=style, decimals=decimals),
        wrap=WrapConfig(signed=signed),
        random=RandomConfig(seed=seed),
    )


def load_config(path: Optional[str]) -> Config:
    if not path:
        return Config()
    with open(path, "r", encoding="utf-8") as f:
        d = yaml.safe_load(f)
    return config_from_mapping(d)

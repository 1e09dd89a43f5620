from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .errors import FluidConfigError
from .theme import default_theme

DEFAULT_CONFIG_NAMES = ("fluid.config.yaml", "fluid.config.yml")
DEFAULT_CONTENT = ["**/*.html"]


@dataclass
class BuildConfig:
    base_dir: Path = field(default_factory=Path.cwd)
    content: List[str] = field(default_factory=lambda: list(DEFAULT_CONTENT))
    output: Path = Path("fluid.css")
    theme: Dict[str, Any] = field(default_factory=default_theme)
    core_plugins: Optional[List[str]] = None
    config_path: Optional[Path] = None


def merge_theme(base: Mapping[str, Any], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Replace top-level theme keys, then merge the `extend` section into them."""
    overrides = dict(overrides or {})
    extend = overrides.pop("extend", None) or {}
    if not isinstance(extend, Mapping):
        raise FluidConfigError("`theme.extend` must be a mapping")
    theme = dict(base)
    theme.update(overrides)
    for key, value in extend.items():
        current = theme.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            theme[key] = {**current, **value}
        else:
            theme[key] = value
    return theme


def _string_list(raw: Any, key: str) -> List[str]:
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise FluidConfigError(f"`{key}` must be a string or a list of strings")
    return list(raw)


def find_config(start: Path) -> Optional[Path]:
    for name in DEFAULT_CONFIG_NAMES:
        candidate = start / name
        if candidate.is_file():
            return candidate
    return None


def load_config(cfg_path: str | Path) -> BuildConfig:
    """Load a YAML build config; relative paths resolve against its directory."""
    cfg_path = Path(cfg_path).expanduser().resolve()
    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as err:
        raise FluidConfigError(f"Cannot parse {cfg_path}: {err}") from err
    if not isinstance(raw, Mapping):
        raise FluidConfigError(f"{cfg_path} must contain a mapping")

    theme = raw.get("theme") or {}
    if not isinstance(theme, Mapping):
        raise FluidConfigError("`theme` must be a mapping")

    config = BuildConfig(base_dir=cfg_path.parent, config_path=cfg_path)
    config.theme = merge_theme(default_theme(), theme)
    if "content" in raw:
        config.content = _string_list(raw["content"], "content")
    if raw.get("output"):
        config.output = Path(str(raw["output"]))
    if raw.get("corePlugins") is not None:
        config.core_plugins = _string_list(raw["corePlugins"], "corePlugins")
    return config

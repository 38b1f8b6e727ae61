from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .stdlib import GO_STDLIB, build_stdlib, load_stdlib

DEFAULT_CFG_FILE = ".goisort.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "local_package": "",
    "write": False,
    "stdlib_file": None,
    "extra_stdlib": [],
}

_KEY_TYPES: Dict[str, tuple] = {
    "local_package": (str,),
    "write": (bool,),
    "stdlib_file": (str, type(None)),
    "extra_stdlib": (list,),
}

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class Settings:
    """Effective settings after merging defaults, the config file and CLI flags."""
    local_package: str = ""
    write: bool = False
    stdlib_file: Optional[Path] = None
    extra_stdlib: tuple = ()

    def stdlib(self) -> AbstractSet[str]:
        """Standard library set to classify against."""
        base = load_stdlib(self.stdlib_file) if self.stdlib_file else GO_STDLIB
        if not self.extra_stdlib:
            return base
        return base | build_stdlib(self.extra_stdlib)


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _validate(raw: Dict[str, Any], path: Path) -> None:
    unknown = sorted(set(raw) - set(_DEFAULT_CFG))
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(unknown)}")
    for key, value in raw.items():
        if not isinstance(value, _KEY_TYPES[key]):
            raise ConfigError(f"{path}: '{key}' has invalid type {type(value).__name__}")
    extra: List[Any] = raw.get("extra_stdlib") or []
    if not all(isinstance(pkg, str) for pkg in extra):
        raise ConfigError(f"{path}: 'extra_stdlib' must be a list of strings")


def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of the defaults."""
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)
    return cfg


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> Dict[str, Any]:
    """
    Load a goisort config file.

    • Missing file → defaults.
    • `stdlib_file` is resolved relative to the config file's directory.
    """
    if not path.exists():
        return _DEFAULT_CFG.copy()

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to load config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    _validate(raw, path)

    cfg = _merge_defaults(raw)
    if cfg["stdlib_file"]:
        cfg["stdlib_file"] = str((path.parent / cfg["stdlib_file"]).resolve())
    return cfg


def resolve_settings(
    config_path: Optional[Path] = None,
    *,
    local_package: Optional[str] = None,
    write: Optional[bool] = None,
    stdlib_file: Optional[str] = None,
) -> Settings:
    """
    Build effective settings. Explicit arguments (CLI flags) override the file.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CFG_FILE
    elif not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    cfg = load_config(config_path)
    if local_package is not None:
        cfg["local_package"] = local_package
    if write:
        cfg["write"] = True
    if stdlib_file is not None:
        cfg["stdlib_file"] = stdlib_file

    return Settings(
        local_package=cfg["local_package"],
        write=bool(cfg["write"]),
        stdlib_file=Path(cfg["stdlib_file"]) if cfg["stdlib_file"] else None,
        extra_stdlib=tuple(cfg["extra_stdlib"]),
    )


__all__ = ["Settings", "load_config", "resolve_settings", "DEFAULT_CFG_FILE"]

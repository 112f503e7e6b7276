"""Load WatchConfig from freezeguard.yaml, freezeguard.toml or pyproject.toml.

Merges file config with keyword overrides. Overrides win over the file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from freezeguard._errors import ConfigError
from freezeguard.config import WatchConfig

_CONFIG_KEYS = frozenset(f.name for f in fields(WatchConfig))


def load_config(root: Path, **overrides: object) -> WatchConfig:
    """Load WatchConfig from *root*, optionally merging a config file.

    Looks for freezeguard.yaml, freezeguard.yml, freezeguard.toml, then the
    ``[tool.freezeguard]`` table of pyproject.toml, first match wins.

    Raises:
        ConfigError: If the file cannot be parsed or names unknown keys.

    """
    file_config = _read_config_file(root)
    merged = {**file_config, **overrides}
    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"unknown freezeguard config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    return WatchConfig(**merged)  # type: ignore[arg-type]


def _read_config_file(root: Path) -> dict[str, object]:
    """Read freezeguard config if present. Returns empty dict otherwise."""
    for name in ("freezeguard.yaml", "freezeguard.yml"):
        path = root / name
        if path.is_file():
            return _extract_section(_parse_yaml(path), path)
    toml_path = root / "freezeguard.toml"
    if toml_path.is_file():
        return _extract_section(_parse_toml(toml_path), toml_path)
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        tool = _parse_toml(pyproject).get("tool")
        if isinstance(tool, dict):
            return _extract_section(tool, pyproject, required=True)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return data


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def _extract_section(
    data: dict[str, object], path: Path, *, required: bool = False
) -> dict[str, object]:
    """Pull the ``freezeguard`` table out of *data*.

    Dedicated config files may also put keys at the top level; pyproject.toml
    only contributes its ``[tool.freezeguard]`` table.

    """
    section = data.get("freezeguard")
    if section is None:
        return {} if required else dict(data)
    if not isinstance(section, dict):
        msg = f"'freezeguard' section in {path} must be a table"
        raise ConfigError(msg)
    return dict(section)

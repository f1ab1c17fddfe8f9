"""Project configuration loaded from stonescript.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from stonescript.errors import ConfigError

CONFIG_FILENAME = "stonescript.toml"
DEFAULT_ENTRYPOINT = "src/main.ss"


@dataclass(frozen=True, slots=True)
class PackageInfo:
    name: str
    version: str


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Validated contents of a stonescript.toml file."""

    package: PackageInfo | None = None
    dependencies: dict[str, str] = field(default_factory=dict)
    entrypoint: str = DEFAULT_ENTRYPOINT
    left_margin: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str | None = None) -> ProjectConfig:
        """Validate parsed TOML data. An empty dict gives the defaults."""
        package = None
        raw_package = data.get("package")
        if raw_package is not None:
            if not isinstance(raw_package, dict):
                raise ConfigError("[package] must be a table", path)
            name = raw_package.get("name")
            version = raw_package.get("version")
            if not isinstance(name, str):
                raise ConfigError("[package] requires a string 'name'", path)
            if not isinstance(version, str):
                raise ConfigError("[package] requires a string 'version'", path)
            package = PackageInfo(name, version)

        dependencies: dict[str, str] = {}
        raw_deps = data.get("dependencies", {})
        if not isinstance(raw_deps, dict):
            raise ConfigError("[dependencies] must be a table", path)
        for dep_name, spec in raw_deps.items():
            # Either `name = "1.0"` or `name = { version = "1.0" }`
            if isinstance(spec, dict):
                spec = spec.get("version")
                if spec is None:
                    raise ConfigError(f"dependency '{dep_name}': expected version", path)
            if not isinstance(spec, str):
                raise ConfigError(f"dependency '{dep_name}': version is not a string", path)
            dependencies[str(dep_name)] = spec

        entrypoint = DEFAULT_ENTRYPOINT
        left_margin = 0
        build = data.get("build", {})
        if not isinstance(build, dict):
            raise ConfigError("[build] must be a table", path)
        if "entrypoint" in build:
            if not isinstance(build["entrypoint"], str):
                raise ConfigError("[build] 'entrypoint' must be a string", path)
            entrypoint = build["entrypoint"]
        if "left-margin" in build:
            margin = build["left-margin"]
            if not isinstance(margin, int) or isinstance(margin, bool) or margin < 0:
                raise ConfigError("[build] 'left-margin' must be a non-negative integer", path)
            left_margin = margin

        return cls(package, dependencies, entrypoint, left_margin)


def load_config(path: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict when it does not exist."""
    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", str(path)) from exc


def load_project(root: Path, config_path: Path | None = None) -> ProjectConfig:
    """Load and validate the project config (default: ``<root>/stonescript.toml``)."""
    path = config_path if config_path is not None else root / CONFIG_FILENAME
    return ProjectConfig.from_dict(load_config(path), str(path))

"""Controller parameters loaded from a YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

import yaml


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


_STRING_FIELDS = frozenset({"controller_name", "path_type", "use_case"})


@dataclass
class Config:
    """Optional controller parameters; a missing entry is None."""

    controller_name: str | None = None
    desired_linear_vel: float | None = None
    lookahead_distance: float | None = None
    min_lookahead_dist: float | None = None
    max_lookahead_dist: float | None = None
    path_length: float | None = None
    path_type: str | None = None
    use_case: str | None = None

    @classmethod
    def from_yaml_file(cls, path: str | os.PathLike[str]) -> Config:
        """Load parameters from a YAML mapping; unknown keys are ignored."""
        try:
            with open(path, encoding="utf-8") as handle:
                document = yaml.safe_load(handle)
        except OSError as exc:
            raise ConfigError(f"cannot open YAML file: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"cannot parse YAML: {exc}") from exc

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigError("cannot parse YAML: top level must be a mapping")

        values = {
            f.name: _convert(f.name, document[f.name])
            for f in fields(cls)
            if f.name in document
        }
        return cls(**values)


def _convert(name: str, value: Any) -> Any:
    if value is None:
        return None
    if name in _STRING_FIELDS:
        if not isinstance(value, str):
            raise ConfigError(f"cannot parse YAML: {name} must be a string")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"cannot parse YAML: {name} must be a number")
    return float(value)
"""Validator configuration model and loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class ValidatorConfig(BaseModel):
    """Tunable parsing behavior for a :class:`FieldValidator`.

    The defaults reproduce the reference field semantics; a config is only
    needed to resolve ambiguous day/month ordering in dates or to make
    numeric checks reject padded strings.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dayfirst: bool = False
    yearfirst: bool = False
    allow_numeric_whitespace: bool = True
    log_failures: bool = True


def _format_validation_error(error: ValidationError) -> str:
    lines = ["Configuration validation failed:"]
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        lines.append(f"- {location}: {message}")
    return "\n".join(lines)


def load_config(path: str | Path) -> ValidatorConfig:
    """Load a YAML validator configuration file from disk."""

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Unable to read config file '{config_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in config file '{config_path}': {exc}") from exc

    data: Any = raw if raw is not None else {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file '{config_path}' must contain a top-level mapping/object."
        )

    try:
        return ValidatorConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(_format_validation_error(exc)) from exc

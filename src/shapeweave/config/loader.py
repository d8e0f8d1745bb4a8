"""Configuration and description loaders."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from ..descriptions import Description, description_groups_adapter
from ..errors import ConfigurationError, InvalidRangeError
from .schema import Configuration

__all__ = [
    "load_configuration",
    "load_descriptions",
    "parse_descriptions",
    "dump_configuration",
]

_configuration_adapter = TypeAdapter(Configuration)


def _merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    # Mappings merge key by key; lists such as ranges or distractor pools are replaced.
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: str | Path) -> Any:
    # YAML is a superset of JSON, so this reads both formats.
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _raise_range_error(exc: ValidationError) -> None:
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if isinstance(cause, InvalidRangeError):
            name = ".".join(str(part) for part in err.get("loc", ())) or None
            raise InvalidRangeError(cause.lower, cause.upper, name=name) from exc


def _validate(adapter: TypeAdapter, raw: Any, what: str):
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        _raise_range_error(exc)
        raise ConfigurationError(f"invalid {what}:\n{exc}") from exc


def load_configuration(
    source: Union[str, Path, Mapping[str, Any], None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Configuration:
    """Load and validate a :class:`Configuration`.

    ``source`` is a YAML/JSON file path, an already-parsed mapping or ``None``
    for the built-in defaults.  ``overrides`` is deep-merged on top before
    validation.  A range with ``lower > upper`` anywhere in the configuration
    raises :class:`InvalidRangeError`; any other schema violation raises
    :class:`ConfigurationError`.
    """
    if source is None:
        raw: Dict[str, Any] = {}
        where = "configuration"
    elif isinstance(source, Mapping):
        raw = dict(source)
        where = "configuration"
    else:
        raw = _read_yaml(source) or {}
        where = f"configuration in {source}"
    if not isinstance(raw, dict):
        raise ConfigurationError(f"top-level {where} must be a mapping")
    if overrides:
        raw = _merge(raw, overrides)
    return _validate(_configuration_adapter, raw, where)


def parse_descriptions(raw: Any) -> List[List[Description]]:
    """Validate a list of description groups (each a list of description mappings)."""
    if not isinstance(raw, list):
        raise ConfigurationError("descriptions must be a list of description lists")
    return _validate(description_groups_adapter, raw, "descriptions")


def load_descriptions(path: str | Path) -> List[List[Description]]:
    """Read description groups from a YAML/JSON file."""
    return parse_descriptions(_read_yaml(path))


def dump_configuration(configuration: Configuration) -> str:
    """Serialise ``configuration`` to YAML that :func:`load_configuration` reads back."""
    data = configuration.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False)

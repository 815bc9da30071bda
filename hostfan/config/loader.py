import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    ConfigError,
    FanoutConfig,
    UnsupportedConfigFormatError,
    validate_config,
)

# Canonical key -> key accepted from older config files
_ALIASES = {
    "hostnames": None,
    "commandTemplate": "cmdToRun",
    "placeholderTag": "hostnameTag",
    "workerCount": "threadCount",
    "timeoutMillis": "timeoutMs",
}


def load_config(path: str | Path) -> FanoutConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_config(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_config(raw: Mapping[str, Any]) -> FanoutConfig:
    known = set(_ALIASES) | {alias for alias in _ALIASES.values() if alias}
    for key in raw.keys():
        if key not in known:
            raise ConfigError(f"Can't process: {key}")

    fields = {key: _pick(raw, key, alias) for key, alias in _ALIASES.items()}

    hostnames = _build_hostnames(fields["hostnames"])

    command_template = fields["commandTemplate"]
    if not isinstance(command_template, str):
        raise ConfigError("'commandTemplate' should be a string")

    if len(command_template.strip()) < 1:
        raise ConfigError("'commandTemplate' is empty")

    placeholder_tag = fields["placeholderTag"]
    if not isinstance(placeholder_tag, str):
        raise ConfigError("'placeholderTag' should be a string")

    if len(placeholder_tag) < 1:
        raise ConfigError("'placeholderTag' can't be empty")

    config = FanoutConfig(
        hostnames=hostnames,
        command_template=command_template,
        placeholder_tag=placeholder_tag,
        worker_count=fields["workerCount"],
        timeout_ms=fields["timeoutMillis"],
    )
    validate_config(config)
    return config


def _pick(raw: Mapping[str, Any], key: str, alias: str | None) -> Any:
    if alias and key in raw and alias in raw:
        raise ConfigError(f"'{key}' and '{alias}' are the same field, use only one")

    if key in raw:
        return raw[key]

    if alias and alias in raw:
        return raw[alias]

    raise ConfigError(f"Missing '{key}' field")


def _build_hostnames(raw_hostnames: Any) -> tuple[str, ...]:
    if not isinstance(raw_hostnames, list):
        raise ConfigError(
            f"'hostnames' must be a list, got {type(raw_hostnames)}"
        )

    hostnames = []
    for item in raw_hostnames:
        if not isinstance(item, str):
            raise ConfigError(f"{item} should be a string in the hostname list")

        hostname = item.strip()

        if len(hostname) < 1:
            raise ConfigError("A hostname is empty")

        # Duplicates are kept, each one gets its own task
        hostnames.append(hostname)

    return tuple(hostnames)

from __future__ import annotations

import json
import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Mapping

from randex.contracts import GeneratorConfig, IncrementPolicy, StringOptions
from randex.core.errors import InvalidArgumentError

ENV_INCREMENT_POLICY = "RANDEX_INCREMENT_POLICY"
ENV_MAX_INT = "RANDEX_MAX_INT"


def default_config() -> GeneratorConfig:
    return GeneratorConfig()


def validate_config(config: GeneratorConfig) -> None:
    if not isinstance(config.increment_policy, IncrementPolicy):
        raise InvalidArgumentError("increment_policy", f"unknown increment policy {config.increment_policy!r}")
    options = config.default_string_options
    if not isinstance(options, StringOptions) or not options & StringOptions.DEFAULT:
        raise InvalidArgumentError("default_string_options", "at least one character set must be selected")
    if int(options) & ~int(StringOptions.DEFAULT):
        raise InvalidArgumentError("default_string_options", f"unknown character set bits in mask {int(options)}")
    if isinstance(config.max_int, bool) or not isinstance(config.max_int, int) or config.max_int <= 0:
        raise InvalidArgumentError("max_int", "max_int must be a positive integer")


def config_from_mapping(payload: Mapping[str, Any], base: GeneratorConfig | None = None) -> GeneratorConfig:
    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise InvalidArgumentError("config", f"unknown keys: {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    if "increment_policy" in payload:
        try:
            changes["increment_policy"] = IncrementPolicy(payload["increment_policy"])
        except ValueError as exc:
            raise InvalidArgumentError("increment_policy", str(exc)) from exc
    if "default_string_options" in payload:
        raw = payload["default_string_options"]
        if isinstance(raw, list):
            options = StringOptions(0)
            for name in raw:
                try:
                    options |= StringOptions[str(name).upper()]
                except KeyError as exc:
                    raise InvalidArgumentError("default_string_options", f"unknown character set {name!r}") from exc
            changes["default_string_options"] = options
        elif isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            changes["default_string_options"] = StringOptions(raw)
        else:
            raise InvalidArgumentError("default_string_options", "expected a list of set names or an integer mask")
    if "max_int" in payload:
        changes["max_int"] = payload["max_int"]

    config = replace(base or default_config(), **changes)
    validate_config(config)
    return config


def load_config(path: Path) -> GeneratorConfig:
    if not path.exists():
        raise InvalidArgumentError("path", f"config file {path} does not exist")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidArgumentError("path", f"config file {path} is not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise InvalidArgumentError("path", "config file must contain a JSON object")
    return config_from_mapping(payload)


def config_from_env(environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    env = os.environ if environ is None else environ
    payload: dict[str, Any] = {}
    if ENV_INCREMENT_POLICY in env:
        payload["increment_policy"] = env[ENV_INCREMENT_POLICY].strip().lower()
    if ENV_MAX_INT in env:
        try:
            payload["max_int"] = int(env[ENV_MAX_INT])
        except ValueError as exc:
            raise InvalidArgumentError("max_int", f"{ENV_MAX_INT} must be an integer") from exc
    return config_from_mapping(payload)

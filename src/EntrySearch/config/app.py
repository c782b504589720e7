from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from EntrySearch.config.common import env_flag
from EntrySearch.config.contentful import ContentfulConfig, check_contentful, load_contentful
from EntrySearch.config.credentials import DEBUG_MODE_ENV, Credentials, load_credentials
from EntrySearch.config.output import OutputConfig, check_output, load_output
from EntrySearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from EntrySearch.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    contentful: ContentfulConfig
    output: OutputConfig
    credentials: Credentials
    debug: bool = False


def parse_config_dict(
    raw: Mapping[str, Any],
    *,
    environ: Mapping[str, str] | None = None,
    debug: bool = False,
) -> AppConfig:
    """Parse normalized mapping and environment into AppConfig.

    Args:
        raw: Root configuration mapping (may be empty).
        environ: Environment mapping, defaults to ``os.environ``.
        debug: Force debug diagnostics regardless of ``DEBUG_MODE``.

    Raises:
        ConfigurationError: If any value is missing or invalid.
    """
    env = os.environ if environ is None else environ
    try:
        runtime = load_runtime(raw)
        contentful = load_contentful(raw)
        output = load_output(raw)

        check_runtime(runtime)
        check_contentful(contentful)
        check_output(output)

        credentials = load_credentials(env)
    except (TypeError, ValueError) as error:
        if isinstance(error, ConfigurationError):
            raise
        raise ConfigurationError(str(error)) from error

    debug = debug or env_flag(env.get(DEBUG_MODE_ENV))
    if debug:
        runtime = dataclasses.replace(runtime, level="DEBUG")

    return AppConfig(
        runtime=runtime,
        contentful=contentful,
        output=output,
        credentials=credentials,
        debug=debug,
    )


def load_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    debug: bool = False,
) -> AppConfig:
    """Load optional YAML config file merged over built-in defaults.

    Args:
        path: YAML file path, or None to use defaults only.
        environ: Environment mapping, defaults to ``os.environ``.
        debug: Force debug diagnostics.

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        try:
            raw = parse_yaml(path.read_text(encoding="utf-8"))
        except OSError as error:
            raise ConfigurationError(f"Cannot read config file {path}: {error}") from error
        except yaml.YAMLError as error:
            raise ConfigurationError(f"Invalid YAML in {path}: {error}") from error
    return parse_config_dict(raw, environ=environ, debug=debug)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("Config root must be a mapping/object")
    return dict(data)

"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from EntrySearch.config.common import expect_str, get_optional_value, get_section

ALLOWED_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output settings."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output config from raw mapping."""
    section = get_section(raw, "output")
    return OutputConfig(format=expect_str(get_optional_value(section, "format", "console"), "output.format").lower())


def check_output(config: OutputConfig) -> None:
    """Validate output constraints."""
    if config.format not in ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {list(ALLOWED_FORMATS)}")

from __future__ import annotations

"""Public configuration API for EntrySearch."""

from EntrySearch.config.app import AppConfig, load_config, parse_config_dict
from EntrySearch.config.contentful import ContentfulConfig
from EntrySearch.config.credentials import Credentials, load_credentials
from EntrySearch.config.output import OutputConfig
from EntrySearch.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ContentfulConfig",
    "OutputConfig",
    "Credentials",
    "AppConfig",
    "load_config",
    "load_credentials",
    "parse_config_dict",
]

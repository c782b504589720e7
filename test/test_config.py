"""Tests for config loading, environment credentials and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from EntrySearch.config import load_config, load_credentials, parse_config_dict
from EntrySearch.core.errors import ConfigurationError

_ENV = {"SPACE_ID": "space1", "CPA_TOKEN": "token1"}


class TestCredentials(unittest.TestCase):
    def test_environment_defaults_to_master(self) -> None:
        credentials = load_credentials(_ENV)
        self.assertEqual(credentials.space_id, "space1")
        self.assertEqual(credentials.access_token, "token1")
        self.assertEqual(credentials.environment_id, "master")

    def test_explicit_environment(self) -> None:
        credentials = load_credentials({**_ENV, "ENVIRONMENT_ID": "staging"})
        self.assertEqual(credentials.environment_id, "staging")

    def test_token_is_hidden_in_repr(self) -> None:
        self.assertNotIn("token1", repr(load_credentials(_ENV)))

    def test_missing_space_or_token(self) -> None:
        for env in ({}, {"SPACE_ID": "space1"}, {"CPA_TOKEN": "token1"}, {"SPACE_ID": " ", "CPA_TOKEN": "t"}):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    load_credentials(env)


class TestParseConfigDict(unittest.TestCase):
    def test_defaults(self) -> None:
        config = parse_config_dict({}, environ=_ENV)

        self.assertEqual(config.runtime.level, "INFO")
        self.assertFalse(config.runtime.to_file)
        self.assertEqual(config.contentful.api_host, "preview.contentful.com")
        self.assertEqual(config.contentful.app_host, "app.contentful.com")
        self.assertEqual(config.contentful.page_size, 1000)
        self.assertEqual(config.contentful.include, 1)
        self.assertEqual(config.contentful.timeout, 30.0)
        self.assertFalse(config.contentful.send_locale)
        self.assertEqual(config.output.format, "console")
        self.assertFalse(config.debug)

    def test_debug_mode_env_forces_debug_level(self) -> None:
        config = parse_config_dict({"log": {"level": "WARNING"}}, environ={**_ENV, "DEBUG_MODE": "true"})
        self.assertTrue(config.debug)
        self.assertEqual(config.runtime.level, "DEBUG")

    def test_debug_mode_other_values_are_off(self) -> None:
        config = parse_config_dict({}, environ={**_ENV, "DEBUG_MODE": "false"})
        self.assertFalse(config.debug)

    def test_debug_argument(self) -> None:
        self.assertTrue(parse_config_dict({}, environ=_ENV, debug=True).debug)

    def test_missing_credentials_raise_configuration_error(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            parse_config_dict({}, environ={})
        self.assertIn("SPACE_ID", str(ctx.exception))

    def test_invalid_values_raise_configuration_error(self) -> None:
        bad = [
            {"contentful": {"page_size": 0}},
            {"contentful": {"page_size": 1001}},
            {"contentful": {"page_size": "100"}},
            {"contentful": {"include": 11}},
            {"contentful": {"timeout": 0}},
            {"contentful": {"send_locale": "yes"}},
            {"log": {"level": "LOUD"}},
            {"output": {"format": "xml"}},
            {"contentful": ["not", "a", "mapping"]},
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(ConfigurationError):
                    parse_config_dict(raw, environ=_ENV)


class TestLoadConfig(unittest.TestCase):
    def test_yaml_file_overrides_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yml"
            path.write_text(
                "contentful:\n  page_size: 200\n  send_locale: true\noutput:\n  format: JSON\n",
                encoding="utf-8",
            )

            config = load_config(path, environ=_ENV)

        self.assertEqual(config.contentful.page_size, 200)
        self.assertTrue(config.contentful.send_locale)
        self.assertEqual(config.contentful.include, 1)
        self.assertEqual(config.output.format, "json")

    def test_shipped_default_config_is_valid(self) -> None:
        config = load_config(REPO_ROOT / "config" / "default.yml", environ=_ENV)
        self.assertEqual(config.contentful.page_size, 1000)

    def test_no_path_uses_defaults(self) -> None:
        self.assertEqual(load_config(None, environ=_ENV).contentful.page_size, 1000)

    def test_missing_file(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config(Path("/nonexistent/entry-search.yml"), environ=_ENV)

    def test_non_mapping_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                load_config(path, environ=_ENV)


if __name__ == "__main__":
    unittest.main()

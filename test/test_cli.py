"""Tests for the search CLI command and its runner."""

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from EntrySearch.cli.commands import SearchCommand
from EntrySearch.cli.ui import cli
from EntrySearch.core.errors import TransportError
from EntrySearch.core.models import EntryPage, MatchRecord, SearchTerm
from EntrySearch.utils.log import log

_ENV = {"SPACE_ID": "space1", "CPA_TOKEN": "token1", "ENVIRONMENT_ID": None, "DEBUG_MODE": None}

_RECORD = MatchRecord(
    entry_id="e1",
    content_type_id="product",
    field_name="title",
    locale="en-US",
    link="https://app.contentful.com/spaces/space1/environments/master/entries/e1",
    snippet="The [ProductName] Pro",
)


class _StubService:
    def __init__(self, records: list | None = None, error: Exception | None = None) -> None:
        self._records = records or []
        self._error = error
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def search(self, term: SearchTerm, locale: str) -> list:
        self.calls.append((term.text, locale))
        if self._error is not None:
            raise self._error
        return list(self._records)

    def close(self) -> None:
        self.closed = True


class _StubWriter:
    def __init__(self) -> None:
        self.written: list[tuple] = []

    def write_results(self, records, term, locale) -> None:
        self.written.append((list(records), term, locale))


class TestSearchCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        patchers = [
            patch("EntrySearch.cli.ui.load_dotenv"),
            patch("EntrySearch.cli.runner.configure_logging"),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)

    def _invoke(self, args: list[str], service: _StubService, env: dict | None = None):
        with patch("EntrySearch.cli.runner.create_search_service", return_value=service) as factory:
            result = self.runner.invoke(cli, args, env=env or _ENV)
        return result, factory

    def test_prints_table_of_matches(self) -> None:
        service = _StubService([_RECORD])

        result, _ = self._invoke(["ProductName"], service)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Found 1 case-sensitive matches for "ProductName" in locale "en-US":', result.output)
        self.assertIn("The [ProductName] Pro", result.output)
        self.assertIn(_RECORD.link, result.output)
        self.assertEqual(service.calls, [("ProductName", "en-US")])
        self.assertTrue(service.closed)

    def test_locale_argument(self) -> None:
        service = _StubService()

        result, _ = self._invoke(["Widget", "de-DE"], service)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(service.calls, [("Widget", "de-DE")])
        self.assertIn('No case-sensitive matches found for "Widget" in locale "de-DE"', result.output)

    def test_json_format(self) -> None:
        result, _ = self._invoke(["--format", "json", "ProductName"], _StubService([_RECORD]))

        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["count"], 1)
        self.assertEqual(payload["matches"][0]["snippet"], "The [ProductName] Pro")
        self.assertEqual(payload["matches"][0]["content_type"], "product")

    def test_missing_term_is_usage_error_before_network(self) -> None:
        service = _StubService()

        result, factory = self._invoke([], service)

        self.assertEqual(result.exit_code, 2)
        self.assertIn("string to search", result.output)
        factory.assert_not_called()

    def test_missing_credentials_is_usage_error_before_network(self) -> None:
        service = _StubService()

        result, factory = self._invoke(["Widget"], service, env={"SPACE_ID": None, "CPA_TOKEN": None})

        self.assertEqual(result.exit_code, 2)
        self.assertIn("CPA_TOKEN", result.output)
        factory.assert_not_called()

    def test_transport_failure_exits_non_zero_and_closes(self) -> None:
        error = TransportError("Contentful request failed: HTTP 401")
        service = _StubService(error=error)

        result, _ = self._invoke(["Widget"], service)

        self.assertNotEqual(result.exit_code, 0)
        self.assertNotIn("case-sensitive matches", result.output)
        self.assertTrue(service.closed)


class TestSearchCommand(unittest.TestCase):
    def test_execute_passes_records_to_writer(self) -> None:
        writer = _StubWriter()
        command = SearchCommand(
            search_service=_StubService([_RECORD]),
            output_writer=writer,
            term=SearchTerm("ProductName"),
            locale="en-US",
        )

        records = command.execute()

        self.assertEqual(records, [_RECORD])
        self.assertEqual(writer.written, [([_RECORD], "ProductName", "en-US")])


class _StubClient:
    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def fetch_entries(self, *, query, limit, skip, include=1, locale=None) -> EntryPage:
        items = [{"sys": {"id": "e1"}, "fields": {"title": "a Widget b", "sku": "widget-1"}}]
        return EntryPage(items=items, total=1, skip=skip, limit=limit)

    def close(self) -> None:
        pass


class TestDebugLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        patchers = [
            patch("EntrySearch.cli.ui.load_dotenv"),
            patch("EntrySearch.sources.contentful.client.ContentfulApiClient", _StubClient),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.addCleanup(self._reset_logger)

    def _reset_logger(self) -> None:
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()
        log.propagate = True
        log.setLevel("NOTSET")

    def test_debug_flag_emits_diagnostics(self) -> None:
        result = self.runner.invoke(cli, ["--debug", "Widget"], env=_ENV)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[DEBG] Checking entry: e1 (Unknown)", result.output)
        self.assertIn("[DEBG] MATCH FOUND in title at position 2: a [Widget] b", result.output)

    def test_debug_mode_env_enables_diagnostics(self) -> None:
        result = self.runner.invoke(cli, ["Widget"], env={**_ENV, "DEBUG_MODE": "true"})

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[DEBG] Checking entry: e1 (Unknown)", result.output)

    def test_default_level_hides_diagnostics(self) -> None:
        result = self.runner.invoke(cli, ["Widget"], env=_ENV)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("[DEBG]", result.output)
        self.assertIn("a [Widget] b", result.output)


if __name__ == "__main__":
    unittest.main()

import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

import httpx

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import settings  # noqa: E402
from app.integrations.grammar import apply_replacements, correct_grammar  # noqa: E402


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class ApplyReplacementsTests(unittest.TestCase):
    def test_replacements_applied_right_to_left(self):
        matches = [
            {"offset": 2, "length": 3, "replacements": [{"value": "have"}]},
            {"offset": 6, "length": 1, "replacements": [{"value": "an"}]},
        ]
        self.assertEqual(apply_replacements("I has a apple", matches), "I have an apple")

    def test_malformed_matches_are_skipped(self):
        matches = [
            {"offset": "2", "length": 3, "replacements": [{"value": "x"}]},
            {"offset": 0, "length": 0, "replacements": [{"value": "x"}]},
            {"offset": 0, "length": 1, "replacements": []},
            {"offset": 10, "length": 5, "replacements": [{"value": "x"}]},
            "not-a-match",
        ]
        self.assertEqual(apply_replacements("I has a apple", matches), "I has a apple")


class CorrectGrammarTests(unittest.TestCase):
    def setUp(self):
        patcher = patch("app.integrations.grammar.settings", replace(settings, grammar_api_enabled=True))
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_matches_are_applied(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = request.content.decode()
            return httpx.Response(
                200,
                json={"matches": [{"offset": 0, "length": 4, "replacements": [{"value": "This"}]}]},
            )

        self.assertEqual(correct_grammar("Thsi is fine", client=_client(handler)), "This is fine")
        self.assertIn("language=en-US", seen["body"])

    def test_http_error_returns_input(self):
        client = _client(lambda request: httpx.Response(500, text="boom"))
        self.assertEqual(correct_grammar("Thsi is fine", client=client), "Thsi is fine")

    def test_transport_error_returns_input(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.assertEqual(correct_grammar("Thsi is fine", client=_client(handler)), "Thsi is fine")

    def test_invalid_json_returns_input(self):
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        self.assertEqual(correct_grammar("Thsi is fine", client=client), "Thsi is fine")

    def test_long_text_is_not_sent(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"matches": []})

        with patch("app.integrations.grammar.settings", replace(settings, grammar_api_enabled=True, grammar_max_chars=5)):
            self.assertEqual(correct_grammar("Thsi is fine", client=_client(handler)), "Thsi is fine")
        self.assertEqual(calls, [])

    def test_disabled_service_is_a_no_op(self):
        with patch("app.integrations.grammar.settings", replace(settings, grammar_api_enabled=False)):
            client = _client(lambda request: self.fail("grammar service should not be called"))
            self.assertEqual(correct_grammar("Thsi is fine", client=client), "Thsi is fine")


if __name__ == "__main__":
    unittest.main()

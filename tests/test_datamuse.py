import unittest
from unittest.mock import MagicMock

import requests

from crossfill.io.datamuse_client import DatamuseAPIError, DatamuseClient


def fake_response(payload, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class DatamuseClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MagicMock()
        self.client = DatamuseClient(session=self.session)

    def test_synonyms_are_normalized(self) -> None:
        self.session.get.return_value = fake_response(
            [{"word": "feline", "score": 900}, {"word": "house cat", "score": 800}]
        )
        self.assertEqual(self.client.synonyms("cat", 2), ["FELINE", "HOUSECAT"])
        _, kwargs = self.session.get.call_args
        self.assertEqual(kwargs["params"], {"max": 2, "ml": "cat"})

    def test_words_by_pattern_filters_length(self) -> None:
        self.session.get.return_value = fake_response([{"word": "cat"}, {"word": "c-at"}, {"word": "coat"}])
        self.assertEqual(self.client.words_by_pattern("C?T"), ["CAT", "CAT"])
        _, kwargs = self.session.get.call_args
        self.assertEqual(kwargs["params"]["sp"], "c?t")

    def test_definition_prefers_free_dictionary(self) -> None:
        self.session.get.return_value = fake_response(
            [{"meanings": [{"definitions": [{"definition": "A small domesticated carnivore."}]}]}]
        )
        self.assertEqual(self.client.definition("cat"), "A small domesticated carnivore.")
        self.assertEqual(self.session.get.call_count, 1)

    def test_definition_falls_back_to_datamuse(self) -> None:
        self.session.get.side_effect = [
            fake_response({"title": "No Definitions Found"}, status_code=404),
            fake_response([{"word": "cat", "defs": ["n\tfeline mammal"]}]),
        ]
        self.assertEqual(self.client.definition("cat"), "feline mammal")

    def test_definition_missing_everywhere(self) -> None:
        self.session.get.side_effect = [
            fake_response({}, status_code=404),
            fake_response([{"word": "qwz"}]),
        ]
        self.assertIsNone(self.client.definition("qwz"))

    def test_network_errors_are_wrapped(self) -> None:
        self.session.get.side_effect = requests.ConnectionError("offline")
        with self.assertRaises(DatamuseAPIError):
            self.client.synonyms("cat")

    def test_http_errors_are_wrapped(self) -> None:
        self.session.get.return_value = fake_response([], status_code=500)
        with self.assertRaises(DatamuseAPIError):
            self.client.find_words(means_like="cat")


if __name__ == "__main__":
    unittest.main()

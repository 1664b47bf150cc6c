import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from crossfill.core.exceptions import LexiconLoadError, LookupUnavailableError
from crossfill.data.base_words import CROSSWORDESE_SCORE, HIGH_QUALITY_SCORE
from crossfill.data.lexicon import Lexicon, LexiconConfig
from crossfill.data.normalization import clean_pattern, clean_word
from crossfill.data.wordlist_io import parse_word_list


def small_lexicon(words, **config) -> Lexicon:
    return Lexicon(LexiconConfig(include_base_words=False, **config), words=words)


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_accents_and_symbols(self) -> None:
        self.assertEqual(clean_word("Café-au lait!"), "CAFEAULAIT")

    def test_clean_pattern_maps_wildcards(self) -> None:
        self.assertEqual(clean_pattern("c_t?"), "C?T?")


class LexiconScoringTests(unittest.TestCase):
    def test_unknown_word_gets_default_score(self) -> None:
        lexicon = small_lexicon({"CAT": 70})
        self.assertEqual(lexicon.score("cat"), 70)
        self.assertEqual(lexicon.score("QWZ"), 40)

    def test_base_words_are_loaded_by_default(self) -> None:
        lexicon = Lexicon()
        self.assertIn("CAT", lexicon)
        self.assertEqual(lexicon.score("CAT"), HIGH_QUALITY_SCORE)
        self.assertEqual(lexicon.score("OREO"), CROSSWORDESE_SCORE)
        self.assertTrue(lexicon.is_overused("oreo"))
        self.assertFalse(lexicon.is_overused("CAT"))

    def test_add_word_rejects_bad_scores(self) -> None:
        lexicon = small_lexicon({})
        with self.assertRaises(ValueError):
            lexicon.add_word("CAT", 101)
        with self.assertRaises(ValueError):
            lexicon.add_word("123", 50)
        lexicon.add_word("dog", 55)
        self.assertEqual(lexicon.score("DOG"), 55)
        self.assertEqual(lexicon.word_count(), 1)

    def test_bulk_load_rejects_bad_scores(self) -> None:
        with self.assertRaises(ValueError):
            small_lexicon({"CAT": 150})
        lexicon = small_lexicon({"DOG": 100, "EEL": 0})
        with self.assertRaises(ValueError):
            lexicon.load_words([("owl", -1)])
        self.assertFalse(lexicon.contains("OWL"))
        self.assertEqual(lexicon.score("EEL"), 0)

    def test_later_scores_replace_earlier_ones(self) -> None:
        lexicon = small_lexicon({"CAT": 20})
        lexicon.load_words([("cat", 90)])
        self.assertEqual(lexicon.score("CAT"), 90)
        self.assertEqual(len(lexicon), 1)

    def test_config_filters_length_and_score(self) -> None:
        lexicon = small_lexicon({"AT": 90, "CAT": 10, "DOG": 50}, min_score=20)
        self.assertFalse(lexicon.contains("AT"))
        self.assertFalse(lexicon.contains("CAT"))
        self.assertTrue(lexicon.contains("DOG"))


class PatternMatchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lexicon = small_lexicon({"CAT": 50, "COT": 70, "CUT": 50, "DOG": 90, "COAT": 80})

    def test_wildcards_match_any_letter(self) -> None:
        words = [item.word for item in self.lexicon.match_pattern("C?T")]
        self.assertEqual(words, ["COT", "CAT", "CUT"])
        self.assertEqual(self.lexicon.match_pattern("c_t"), self.lexicon.match_pattern("C?T"))

    def test_min_score_filters(self) -> None:
        words = [item.word for item in self.lexicon.match_pattern("C?T", min_score=60)]
        self.assertEqual(words, ["COT"])

    def test_length_must_match(self) -> None:
        self.assertEqual(self.lexicon.match_pattern("C??T")[0].word, "COAT")
        self.assertEqual(self.lexicon.match_pattern("C????"), [])
        self.assertEqual(self.lexicon.match_pattern("X?T"), [])

    def test_top_words_and_length_listing(self) -> None:
        top = self.lexicon.top_words(3, limit=2)
        self.assertEqual([item.word for item in top], ["DOG", "COT"])
        self.assertEqual(self.lexicon.words_of_length(3), ["CAT", "COT", "CUT", "DOG"])


class WordListLoadingTests(unittest.TestCase):
    def test_loads_scored_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "words.txt"
            source.write_text("# broda style\ncat;50\n\nDOG;60\n", encoding="utf-8")
            lexicon = small_lexicon({}, path=source)
        self.assertEqual(lexicon.score("CAT"), 50)
        self.assertEqual(lexicon.score("DOG"), 60)
        self.assertEqual(len(lexicon), 2)

    def test_malformed_line_names_line_number(self) -> None:
        with self.assertRaises(LexiconLoadError) as ctx:
            list(parse_word_list(["CAT;50", "DOG60"], source="words.txt"))
        self.assertIn("words.txt:2", str(ctx.exception))

    def test_out_of_range_score_rejected(self) -> None:
        with self.assertRaises(LexiconLoadError):
            list(parse_word_list(["CAT;150"]))
        with self.assertRaises(LexiconLoadError):
            list(parse_word_list(["CAT;high"]))

    def test_missing_file(self) -> None:
        with self.assertRaises(LexiconLoadError):
            small_lexicon({}, path="/nonexistent/words.txt")


class LookupDelegationTests(unittest.TestCase):
    def test_without_lookup_raises(self) -> None:
        lexicon = small_lexicon({"CAT": 50})
        with self.assertRaises(LookupUnavailableError):
            lexicon.synonyms("cat")
        with self.assertRaises(LookupUnavailableError):
            lexicon.definition("cat")

    def test_delegates_to_injected_lookup(self) -> None:
        lookup = MagicMock()
        lookup.synonyms.return_value = ["FELINE"]
        lookup.definition.return_value = "A small domesticated carnivore"
        lexicon = Lexicon(LexiconConfig(include_base_words=False), lookup=lookup)

        self.assertEqual(lexicon.synonyms("cat", 3), ["FELINE"])
        lookup.synonyms.assert_called_once_with("CAT", 3)
        self.assertEqual(lexicon.definition("cat"), "A small domesticated carnivore")


if __name__ == "__main__":
    unittest.main()

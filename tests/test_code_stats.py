import sys
from pathlib import Path
import unittest

_project_root = Path(__file__).resolve().parent.parent
_project_root_str = str(_project_root)
if _project_root_str not in sys.path:
    sys.path.insert(0, _project_root_str)

from utils.code_stats import compute_stats, count_functions


class TestCodeStats(unittest.TestCase):
    def test_empty_text(self):
        stats = compute_stats("")
        self.assertEqual(stats.lines, 1)
        self.assertEqual(stats.characters, 0)
        self.assertEqual(stats.words, 0)
        self.assertEqual(stats.functions, 0)

    def test_line_count_matches_split(self):
        for text in ["a", "a\n", "\n\n", "a\nb\nc", "x\r\ny"]:
            with self.subTest(text=text):
                self.assertEqual(compute_stats(text).lines, len(text.split("\n")))

    def test_whitespace_only_has_no_words(self):
        stats = compute_stats("  \n\t ")
        self.assertEqual(stats.words, 0)
        self.assertEqual(stats.characters, 5)
        self.assertEqual(stats.lines, 2)

    def test_words_split_on_any_whitespace(self):
        self.assertEqual(compute_stats("let  x =\n\t5;").words, 4)

    def test_word_separators_follow_javascript_whitespace(self):
        # Separators and NEL are not whitespace in JS; the BOM is
        self.assertEqual(compute_stats("a\x1cb").words, 1)
        self.assertEqual(compute_stats("a\x85b").words, 1)
        self.assertEqual(compute_stats("a\ufeffb").words, 2)
        self.assertEqual(compute_stats("a\u3000b\u00a0c").words, 3)

    def test_characters_count_code_points(self):
        self.assertEqual(compute_stats("h\u00e9llo \u2713").characters, 7)

    def test_function_heuristic_counts_keywords_and_arrows(self):
        text = "function a() {}\nconst b = () => 1;\nclass C {}"
        self.assertEqual(count_functions(text), 3)

    def test_function_heuristic_is_rough(self):
        # Matches inside identifiers too; the count is only an estimate
        self.assertEqual(count_functions("className"), 1)


if __name__ == '__main__':
    unittest.main()

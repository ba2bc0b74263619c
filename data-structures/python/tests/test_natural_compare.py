import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from natural_compare import strnatcmp, strnatcasecmp


class TestStrnatcmp(unittest.TestCase):
    def test_equal_strings(self):
        self.assertEqual(strnatcmp("abc", "abc"), 0)

    def test_empty_strings(self):
        self.assertEqual(strnatcmp("", ""), 0)

    def test_empty_sorts_first(self):
        self.assertEqual(strnatcmp("", "a"), -1)
        self.assertEqual(strnatcmp("a", ""), 1)

    def test_plain_lexicographic(self):
        self.assertEqual(strnatcmp("abc", "abd"), -1)
        self.assertEqual(strnatcmp("abd", "abc"), 1)

    def test_prefix_sorts_first(self):
        self.assertEqual(strnatcmp("ab", "abc"), -1)

    def test_numeric_runs_compare_by_value(self):
        self.assertEqual(strnatcmp("item2", "item10"), -1)
        self.assertEqual(strnatcmp("item10", "item2"), 1)

    def test_same_length_numbers(self):
        self.assertEqual(strnatcmp("x19", "x20"), -1)
        self.assertEqual(strnatcmp("x21", "x20"), 1)

    def test_equal_numbers_continue_with_suffix(self):
        self.assertEqual(strnatcmp("img12a", "img12b"), -1)

    def test_multiple_numeric_runs(self):
        self.assertEqual(strnatcmp("1.2.10", "1.2.9"), 1)
        self.assertEqual(strnatcmp("v3-part2", "v3-part11"), -1)

    def test_leading_zero_compares_left_aligned(self):
        self.assertEqual(strnatcmp("1.010", "1.02"), -1)
        self.assertEqual(strnatcmp("x01", "x1"), -1)

    def test_leading_whitespace_ignored(self):
        self.assertEqual(strnatcmp("x 1", "x1"), 0)
        self.assertEqual(strnatcmp("  a", "a"), 0)

    def test_digit_against_letter(self):
        self.assertEqual(strnatcmp("a1", "ab"), -1)

    def test_case_sensitive(self):
        self.assertEqual(strnatcmp("B", "a"), -1)
        self.assertEqual(strnatcmp("a", "A"), 1)

    def test_antisymmetric(self):
        pairs = [("item2", "item10"), ("abc", "abd"), ("x01", "x1"), ("a", "b1")]
        for a, b in pairs:
            self.assertEqual(strnatcmp(a, b), -strnatcmp(b, a))


class TestStrnatcasecmp(unittest.TestCase):
    def test_ignores_case(self):
        self.assertEqual(strnatcasecmp("ABC", "abc"), 0)

    def test_case_folded_ordering(self):
        self.assertEqual(strnatcasecmp("B", "a"), 1)

    def test_numbers_still_natural(self):
        self.assertEqual(strnatcasecmp("File2", "file10"), -1)


if __name__ == "__main__":
    unittest.main()

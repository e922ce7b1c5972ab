import unittest

from reading_engine.extract import MAX_TOKEN_DIGITS, extract_numbers, parse_number


class TestExtractNumbers(unittest.TestCase):
    def test_social_screenshot_tokens(self):
        tokens = extract_numbers("10:24 • 67% • 144 likes")

        self.assertEqual([t.value for t in tokens], [10, 24, 67, 144])
        self.assertEqual([t.raw for t in tokens], ["10", "24", "67", "144"])
        self.assertEqual([t.index for t in tokens], [0, 1, 2, 3])

    def test_empty_and_missing_text(self):
        self.assertEqual(extract_numbers(""), [])
        self.assertEqual(extract_numbers(None), [])
        self.assertEqual(extract_numbers("no numbers here"), [])

    def test_decimal_token(self):
        tokens = extract_numbers("Temperature: 98.6°F")

        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].value, 98.6)
        self.assertEqual(tokens[0].raw, "98.6")

    def test_integral_decimal_collapses_to_int(self):
        tokens = extract_numbers("score 10.0")

        self.assertEqual(tokens[0].value, 10)
        self.assertIsInstance(tokens[0].value, int)
        self.assertEqual(tokens[0].raw, "10.0")

    def test_trailing_dot_is_not_consumed(self):
        tokens = extract_numbers("Room 12.")

        self.assertEqual([t.raw for t in tokens], ["12"])

    def test_dotted_sequences_split_left_to_right(self):
        tokens = extract_numbers("v1.2.3 and 3.14.15")

        self.assertEqual([t.raw for t in tokens], ["1.2", "3", "3.14", "15"])
        self.assertEqual([t.index for t in tokens], [0, 1, 2, 3])

    def test_separators_are_not_part_of_tokens(self):
        tokens = extract_numbers("-5 · 1,000 · 50%")

        self.assertEqual([t.raw for t in tokens], ["5", "1", "000", "50"])
        self.assertEqual([t.value for t in tokens], [5, 1, 0, 50])

    def test_non_ascii_digits_are_ignored(self):
        self.assertEqual(extract_numbers("٣٣ and 7"), extract_numbers("7"))

    def test_indexes_are_contiguous(self):
        tokens = extract_numbers(" ".join(str(n) for n in range(40)))

        self.assertEqual([t.index for t in tokens], list(range(40)))
        self.assertEqual([t.value for t in tokens], list(range(40)))


class TestParseNumber(unittest.TestCase):
    def test_parse_number_variants(self):
        self.assertEqual(parse_number("007"), 7)
        self.assertEqual(parse_number("3.14"), 3.14)
        self.assertEqual(parse_number("2.50"), 2.5)
        self.assertIsInstance(parse_number("4.000"), int)

    def test_out_of_range_decimal_is_skipped(self):
        huge = "9" * 400 + ".5"

        with self.assertRaises(OverflowError):
            parse_number(huge)
        self.assertEqual([t.raw for t in extract_numbers(f"{huge} 8")], ["8"])

    def test_token_digit_limit(self):
        longest = "7" * MAX_TOKEN_DIGITS
        too_long = "7" * (MAX_TOKEN_DIGITS + 1)

        self.assertEqual(len(extract_numbers(longest)[0].raw), MAX_TOKEN_DIGITS)
        self.assertEqual(extract_numbers(too_long), [])
        self.assertEqual([t.raw for t in extract_numbers(f"{too_long} 5 {too_long}.5")], ["5"])


if __name__ == "__main__":
    unittest.main()

# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import unittest

from uniconvert.layout import ConfigurationError, StyleSpec, split_word, wrap_text

from tests.test_support import BODY, MONO


class TestWrapText(unittest.TestCase):
    """Greedy wrapping against monospace metrics (6pt per character)."""

    def test_breaks_between_words(self) -> None:
        width = (MONO("The quick", BODY.font, 12) + MONO("The quick brown", BODY.font, 12)) / 2
        lines = wrap_text("The quick brown fox", BODY, width, MONO)
        self.assertEqual(lines, ["The quick", "brown fox"])

    def test_text_that_fits_stays_on_one_line(self) -> None:
        self.assertEqual(wrap_text("short line", BODY, 500, MONO), ["short line"])

    def test_empty_text_yields_no_lines(self) -> None:
        self.assertEqual(wrap_text("", BODY, 100, MONO), [])
        self.assertEqual(wrap_text("   \n\t ", BODY, 100, MONO), [])

    def test_collapses_whitespace_runs(self) -> None:
        lines = wrap_text("alpha   beta\n\tgamma", BODY, 500, MONO)
        self.assertEqual(lines, ["alpha beta gamma"])

    def test_non_positive_width_raises(self) -> None:
        for width in (0, -5):
            with self.subTest(width=width):
                with self.assertRaises(ConfigurationError):
                    wrap_text("text", BODY, width, MONO)

    def test_lines_never_exceed_width(self) -> None:
        text = " ".join(f"word{index}" for index in range(60))
        width = 90.0
        for line in wrap_text(text, BODY, width, MONO):
            self.assertLessEqual(MONO(line, BODY.font, 12), width)

    def test_rewrapping_is_stable(self) -> None:
        text = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod"
        first = wrap_text(text, BODY, 100, MONO)
        second = wrap_text(" ".join(first), BODY, 100, MONO)
        self.assertEqual(first, second)

    def test_words_are_preserved_in_order(self) -> None:
        text = "one  two three\nfour five six seven eight"
        lines = wrap_text(text, BODY, 60, MONO)
        self.assertEqual(" ".join(lines).split(), text.split())

    def test_long_word_is_split_into_fragments(self) -> None:
        word = "Supercalifragilistic"
        lines = wrap_text(word, BODY, 30, MONO)
        self.assertGreater(len(lines), 1)
        self.assertEqual("".join(lines), word)
        for line in lines:
            self.assertLessEqual(MONO(line, BODY.font, 12), 30)

    def test_last_fragment_of_long_word_accepts_following_words(self) -> None:
        lines = wrap_text("abcdefgh ij", BODY, 36, MONO)
        self.assertEqual(lines, ["abcdef", "gh ij"])

    def test_uses_style_size_for_measurement(self) -> None:
        large = StyleSpec(font=BODY.font, size_pt=24.0)
        self.assertEqual(wrap_text("aaaa bbbb", large, 100, MONO), ["aaaa", "bbbb"])
        self.assertEqual(wrap_text("aaaa bbbb", BODY, 100, MONO), ["aaaa bbbb"])


class TestSplitWord(unittest.TestCase):
    def test_character_wider_than_line_is_still_emitted(self) -> None:
        self.assertEqual(split_word("abc", BODY, 3, MONO), ["a", "b", "c"])

    def test_fragments_concatenate_to_word(self) -> None:
        parts = split_word("abcdefghijk", BODY, 24, MONO)
        self.assertEqual(parts, ["abcd", "efgh", "ijk"])

    def test_empty_word(self) -> None:
        self.assertEqual(split_word("", BODY, 24, MONO), [])


if __name__ == "__main__":
    unittest.main()

"""
Text primitive tests (tab expansion, word wrapping, splitting, booleans).

Scope
- TabExpander: tab stops, column tracking, newline resets.
- WordWrapper: soft breaks at whitespace, hard breaks, line orientation,
  clamping, idempotency under re-wrapping.
- split/parse_bool: empty fields and boolean spellings.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from commandline.formatting import TabExpander, WordWrapper, split, parse_bool


class TestTabExpander(TestCase):

    def testLeadingTabReachesFirstStop(self):
        self.assertEqual(TabExpander(2).expand("\tab\tc"), "  ab  c")

    def testTabAfterOddColumnAddsOneSpace(self):
        self.assertEqual(TabExpander(2).expand("a\tb"), "a b")

    def testWiderTabStop(self):
        self.assertEqual(TabExpander(4).expand("ab\tc"), "ab  c")

    def testNewlineResetsColumn(self):
        self.assertEqual(TabExpander(2).expand("abc\n\tx"), "abc\n  x")

    def testTextWithoutTabsIsUnchanged(self):
        self.assertEqual(TabExpander(2).expand("--verbose"), "--verbose")

    def testTabStopMustBePositive(self):
        with self.assertRaises(ValueError):
            TabExpander(0)


class TestWordWrapper(TestCase):

    def testBreaksAtLastWhitespace(self):
        self.assertEqual(WordWrapper(10).wrap_words("the quick brown fox"), ["the quick", "brown fox"])

    def testHardBreakWithoutWhitespace(self):
        self.assertEqual(WordWrapper(5).wrap_words("abcdefghij"), ["abcd", "efgh", "ij"])

    def testShortTextIsOneLine(self):
        self.assertEqual(WordWrapper(80).wrap_words("Print this help text."), ["Print this help text."])

    def testEmptyTextIsOneEmptyLine(self):
        self.assertEqual(WordWrapper(80).wrap_words(""), [""])

    def testEmbeddedNewlinesWrapIndependently(self):
        self.assertEqual(
            WordWrapper(10).wrap_words("one two three\nfour"),
            ["one two", "three", "four"],
        )

    def testWhitespaceAroundCutsIsDiscarded(self):
        lines = WordWrapper(8).wrap_words("alpha    beta    gamma")
        self.assertEqual(lines, ["alpha", "beta", "gamma"])

    def testLinesNeverReachLastColumn(self):
        text = "Context window size and prompt batch size, separated by a comma, for every request served."
        for columns in (12, 20, 33, 44):
            for line in WordWrapper(columns).wrap_words(text):
                self.assertLessEqual(len(line), columns - 1)

    def testColumnsAreClampedToTwo(self):
        wrapper = WordWrapper(0)
        self.assertEqual(wrapper.columns, 2)
        self.assertEqual(wrapper.wrap_words("abc"), ["a", "b", "c"])

    def testRewrappingIsIdempotent(self):
        text = (
            "Path to the multimodal projector weights that pair with the language model; "
            "the server refuses to start when the projector and the model disagree."
        )
        for columns in (15, 30, 44, 62):
            wrapper = WordWrapper(columns)
            once = wrapper.wrap_words(text)
            self.assertEqual(wrapper.wrap_words("\n".join(once)), once)

    def testExpandedTabsAreNotSplit(self):
        text = TabExpander(2).expand("host\tport\tmodel\tprojector\tthreads\tcontext")
        for line in WordWrapper(12).wrap_words(text):
            self.assertEqual(line, line.strip())


class TestHelpers(TestCase):

    def testSplitKeepsEmptyFields(self):
        self.assertEqual(split("a,,b", ","), ["a", "", "b"])
        self.assertEqual(split("", ","), [""])

    def testSplitRejectsLongSeparators(self):
        with self.assertRaises(ValueError):
            split("a,b", ",,")

    def testParseBoolSpellings(self):
        for text in ("true", "TRUE", "on", "Yes", "1"):
            self.assertTrue(parse_bool(text))
        for text in ("false", "Off", "NO", "0"):
            self.assertFalse(parse_bool(text))

    def testParseBoolRejectsOtherText(self):
        with self.assertRaises(ValueError):
            parse_bool("maybe")


if __name__ == "__main__":
    unittest.main()

import json
import unittest

from tagcore.dbfutil import GenericException
from taggrep.match import OccurrenceMatch, SourceMismatchException
from taggrep.test.grep_test import GrepTest

from tests.text import LEXICON, TEST_TEXT


class TestMatch(GrepTest):

    lexicon_lines = LEXICON

    def match(self, begin, end, source=None):
        return OccurrenceMatch(self.tseq[begin:end], begin, end, source=source)

    def test_match(self):
        print("test_match")

        self.tseq = self.seq_from_text(TEST_TEXT).occurrences
        m = self.match

        self.assertLess(m(0, 5), m(1, 5))
        self.assertLess(m(0, 5), m(1, 4))
        self.assertLess(m(0, 5), m(1, 6))
        self.assertEqual(m(0, 5), m(0, 5))
        self.assertGreater(m(0, 5), m(0, 4))
        self.assertLess(m(0, 5), m(0, 6))
        self.assertEqual(len({m(0, 5), m(0, 5), m(1, 5)}), 2)

        self.assertTrue(m(1, 5).overlaps(m(1, 5)))
        self.assertTrue(m(1, 6).overlaps(m(1, 5)))
        self.assertTrue(m(0, 5).overlaps(m(1, 5)))
        self.assertTrue(m(1, 5).overlaps(m(0, 6)))
        self.assertFalse(m(0, 2).overlaps(m(2, 4)))
        self.assertFalse(m(2, 4).overlaps(m(0, 2)))

        self.assertTrue(m(1, 4).covers(1))
        self.assertTrue(m(1, 4).covers(2, 4))
        self.assertFalse(m(1, 4).covers(4))

        print("test_match done")

    def test_sources(self):
        print("test_sources")
        self.tseq = self.seq_from_text(TEST_TEXT).occurrences
        other = "Le petit chat noir"
        a = self.match(0, 2, source=TEST_TEXT)
        b = self.match(0, 2, source=other)
        self.assertNotEqual(a, b)
        self.assertNotEqual(a, None)
        with self.assertRaises(SourceMismatchException):
            a < b
        with self.assertRaises(SourceMismatchException):
            a.overlaps(b)
        with self.assertRaises(GenericException):
            OccurrenceMatch(self.tseq[0:2], 0, 3)

    def test_text(self):
        print("test_text")
        self.tseq = self.seq_from_text(TEST_TEXT).occurrences
        m = self.match(1, 4, source=TEST_TEXT)
        self.assertEqual(m.start_offset(), 3)
        self.assertEqual(m.end_offset(), 18)
        self.assertEqual(m.matching_text(), "petit chat noir")
        self.assertEqual(m.forms(), ["petit", "chat", "noir"])
        self.assertEqual(self.match(1, 4).matching_text(), "petit chat noir")
        data = json.loads(m.as_json())
        self.assertEqual(data["text"], "petit chat noir")
        self.assertEqual((data["begin"], data["end"]), (1, 4))
        self.assertEqual(data["occurrences"][1], dict(form="chat", lemma="chat", category=0x20))


if __name__ == '__main__':
    unittest.main()

import unittest

from tagcore import categories
from taggrep.expression import compile_pattern
from taggrep.matcher import StreamMatcher
from taggrep.test.grep_test import GrepTest, symbol_stream

from tests.text import SYMBOL_STREAM


class TestMatcher(GrepTest):

    def setUp(self):
        super().setUp()
        self.parse_block("""
alt_tail -> A B(A ,C)
gap      -> A ** C
gap2     -> A **2 C
abc      -> A B C
any      -> *
any2     -> * *
trailing -> A **
single   -> A
chains   -> A (B C, D) E
greedy   -> A (B, B C) D
gap_alt  -> A ** (C, D)
        """)

    def test_alternation_at_end(self):
        print("test_alternation_at_end")
        self.assertEqual(self.extents('alt_tail', symbol_stream(SYMBOL_STREAM)), [(0, 3), (5, 8)])

    def test_gap(self):
        print("test_gap")
        stream = symbol_stream(SYMBOL_STREAM)
        self.assertEqual(self.extents('gap', stream), [(0, 5), (5, 8), (9, 11), (11, 16)])
        matches = self.matches_stream('gap', stream)
        self.assertEqual(matches[0].forms(), ["A", "B", "A", "B", "C"])

    def test_gap_budget(self):
        print("test_gap_budget")
        self.assertEqual(self.extents('gap', symbol_stream("A x x x x x C")), [(0, 7)])
        self.assertEqual(self.extents('gap', symbol_stream("A x x x x x x C")), [])
        self.assertEqual(self.extents('gap2', symbol_stream("A x x C")), [(0, 4)])
        self.assertEqual(self.extents('gap2', symbol_stream("A x x x C")), [])

    def test_gap_budget_restart(self):
        print("test_gap_budget_restart")
        # The occurrence that exceeds the budget can start a new match
        self.assertEqual(self.extents('gap', symbol_stream("A x x x x x A C")), [(6, 8)])
        self.assertEqual(self.extents('gap2', symbol_stream("A x x A x C")), [(3, 6)])
        self.assertEqual(self.extents('gap2', symbol_stream("A x A C")), [(0, 4)])

    def test_restart(self):
        print("test_restart")
        self.assertEqual(self.extents('abc', symbol_stream("A B A B C")), [(2, 5)])
        self.assertEqual(self.extents('abc', symbol_stream("A B")), [])

    def test_wildcards(self):
        print("test_wildcards")
        stream = symbol_stream("A B C D E")
        self.assertEqual(self.extents('any', stream), [(i, i + 1) for i in range(5)])
        # Completed matches don't overlap
        self.assertEqual(self.extents('any2', stream), [(0, 2), (2, 4)])
        self.assertEqual(self.extents('single', symbol_stream(SYMBOL_STREAM)),
                         [(0, 1), (2, 3), (5, 6), (9, 10), (11, 12)])

    def test_trailing_gap(self):
        print("test_trailing_gap")
        self.assertEqual(self.extents('trailing', symbol_stream("A B A")), [(0, 2)])

    def test_alternative_chains(self):
        print("test_alternative_chains")
        stream = symbol_stream("A B C E A D E A B E")
        self.assertEqual(self.extents('chains', stream), [(0, 4), (4, 7)])
        # The first alternative that accepts an occurrence is the one followed
        self.assertEqual(self.extents('greedy', symbol_stream("A B C D")), [])
        self.assertEqual(self.extents('greedy', symbol_stream("A B D")), [(0, 3)])
        self.assertEqual(self.extents('gap_alt', symbol_stream("A x D")), [(0, 3)])

    def test_categories(self):
        print("test_categories")
        codes = {"le": categories.DETart, "chat": categories.SUB, "noir": categories.ADJ,
                 "dort": categories.VERB}
        stream = symbol_stream("le chat noir dort", codes)
        self.grm.add_pattern('np', "DET SUB ADJ")
        self.assertEqual(self.extents('np', stream), [(0, 3)])
        self.grm.add_pattern('sub_verb', "SUB VERB")
        self.assertEqual(self.extents('sub_verb', stream), [])

    def test_state(self):
        print("test_state")
        matcher = StreamMatcher(compile_pattern("A ** C"))
        stream = symbol_stream("A x C")
        self.assertTrue(matcher.at_root)
        self.assertFalse(matcher.test(stream[0]))
        self.assertEqual(matcher.current, 1)
        self.assertFalse(matcher.test(stream[1]))
        self.assertEqual([occ.orth for occ in matcher.pending()], ["A", "x"])
        self.assertTrue(matcher.test(stream[2]))
        self.assertTrue(matcher.at_root)
        self.assertEqual([occ.orth for occ in matcher.found], ["A", "x", "C"])

    def test_shared_pattern(self):
        print("test_shared_pattern")
        pattern = compile_pattern("A ** C")
        m1 = StreamMatcher(pattern)
        m2 = StreamMatcher(pattern)
        s1 = symbol_stream("A x x x x x C")
        s2 = symbol_stream("x A C")
        results1 = []
        results2 = []
        for i in range(len(s1)):
            results1.append(m1.test(s1[i]))
            if i < len(s2):
                results2.append(m2.test(s2[i]))
        self.assertEqual(results1, [False] * 6 + [True])
        self.assertEqual(results2, [False, False, True])

    def test_scan_resets(self):
        print("test_scan_resets")
        matcher = StreamMatcher(compile_pattern("A B"))
        matcher.test(symbol_stream("A")[0])
        self.assertFalse(matcher.at_root)
        extents = [m.get_extent() for m in matcher.scan(symbol_stream("B A B"))]
        self.assertEqual(extents, [(1, 3)])


if __name__ == '__main__':
    unittest.main()

import unittest

from tagcore import categories
from tagcore.categories import CategoryFilter


FAMILY_PREDICATES = [
    categories.is_verb, categories.is_sub, categories.is_adj, categories.is_adv,
    categories.is_prep, categories.is_det, categories.is_pro, categories.is_conj,
    categories.is_num, categories.is_name, categories.is_pun, categories.is_misc,
]


class TestCategories(unittest.TestCase):

    def test_codes_and_labels(self):
        print("test_codes_and_labels")
        self.assertEqual(categories.code("VERB"), 0x10)
        self.assertEqual(categories.code("VERBaux"), 0x11)
        self.assertEqual(categories.code("SUBloc"), 0x2F)
        self.assertEqual(categories.code("PUNsent"), 0xC1)
        self.assertEqual(categories.code("nope"), categories.UNKNOWN)
        self.assertEqual(categories.label(categories.NULL), "")
        self.assertEqual(categories.label(categories.VERBaux), "VERBaux")
        # Undefined codes print as UNKNOWN
        self.assertEqual(categories.label(0x17), "UNKNOWN")
        self.assertTrue(categories.is_known("DETart"))
        self.assertFalse(categories.is_known("DETART"))
        for name, c in categories.CODES.items():
            self.assertEqual(categories.label(c) or "NULL", name)

    def test_groups(self):
        print("test_groups")
        for name, c in categories.CODES.items():
            if c in (categories.NULL, categories.UNKNOWN):
                self.assertFalse(categories.is_group_marker(c))
                continue
            group = categories.group_of(c)
            self.assertTrue(categories.is_group_marker(group), name)
            # Every family has a named group marker
            self.assertIn(group, categories.LABELS, name)
            self.assertEqual(categories.is_group_marker(c), c == group, name)

    def test_family_predicates(self):
        print("test_family_predicates")
        self.assertTrue(categories.is_verb(categories.VERBppass))
        self.assertFalse(categories.is_verb(categories.SUB))
        self.assertTrue(categories.is_sub(categories.SUBloc))
        self.assertTrue(categories.is_det(categories.DETnum))
        self.assertTrue(categories.is_num(categories.DETnum))
        self.assertTrue(categories.is_num(categories.NUMord))
        self.assertFalse(categories.is_num(categories.DETart))
        self.assertTrue(categories.is_name(categories.NAMEgod))
        self.assertTrue(categories.is_pun(categories.PUNcl))
        self.assertTrue(categories.is_misc(categories.TEST))
        for predicate in FAMILY_PREDICATES:
            self.assertFalse(predicate(categories.NULL))
            self.assertFalse(predicate(categories.UNKNOWN))

    def test_filter_single_codes(self):
        print("test_filter_single_codes")
        cfilter = CategoryFilter(categories.VERBaux, categories.ADJ)
        self.assertTrue(cfilter.accept(categories.VERBaux))
        self.assertIn(categories.ADJ, cfilter)
        self.assertFalse(cfilter.accept(categories.VERB))
        self.assertEqual(len(cfilter), 2)
        cfilter.clear(categories.ADJ)
        self.assertEqual(list(cfilter.codes()), [categories.VERBaux])
        self.assertFalse(cfilter.accept(-1))
        self.assertFalse(cfilter.accept(256))

    def test_filter_groups(self):
        print("test_filter_groups")
        for c in (categories.VERB, categories.VERBaux):
            cfilter = CategoryFilter().set_group(c)
            self.assertEqual(len(cfilter), 16)
            for x in range(CategoryFilter.SIZE):
                self.assertEqual(cfilter.accept(x), categories.is_verb(x))

        cfilter = CategoryFilter().set_all().clear_group(categories.PRO)
        self.assertEqual(len(cfilter), CategoryFilter.SIZE - 16)
        for x in range(CategoryFilter.SIZE):
            self.assertEqual(cfilter.accept(x), not categories.is_pro(x))

        self.assertEqual(CategoryFilter().set_group(categories.SUB).clear(categories.SUBf),
                         CategoryFilter().set_group(categories.SUB).clear(categories.SUBf))
        self.assertEqual(len(cfilter.clear_all()), 0)

    def test_filter_major_nibbles(self):
        print("test_filter_major_nibbles")
        cfilter = CategoryFilter().set_group(categories.VERB_MAJOR)
        self.assertEqual(cfilter, CategoryFilter().set_group(categories.VERB))
        for x in range(CategoryFilter.SIZE):
            self.assertEqual(cfilter.accept(x), categories.is_verb(x))
        self.assertFalse(cfilter.accept(categories.UNKNOWN))

        cfilter = CategoryFilter().set_all().clear_group(categories.PRO_MAJOR)
        self.assertEqual(cfilter, CategoryFilter().set_all().clear_group(categories.PROpers))
        self.assertEqual(len(cfilter), CategoryFilter.SIZE - 16)

    def test_filter_grid(self):
        print("test_filter_grid")
        lines = str(CategoryFilter().set_group(categories.VERB)).splitlines()
        self.assertEqual(len(lines), 16)
        self.assertEqual(lines[1], "VERB\t" + "1" * 16)
        self.assertEqual(lines[2], "SUB\t" + "·" * 16)


if __name__ == '__main__':
    unittest.main()

from abc import ABC, abstractmethod
import re
from typing import Iterable, List, Sequence

from ordered_set import OrderedSet

from tagcore import categories
from tagcore.categories import CategoryFilter
from tagcore.dbfutil import SimpleClass
from tagcore.occurrence import Occurrence


DEFAULT_GAP_BUDGET = 5


class TokenTest(SimpleClass, ABC):
    """Abstract base class for tests applied to a single occurrence."""

    @abstractmethod
    def matches(self, occ: Occurrence) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def label(self) -> str:
        """The test written in the pattern language."""
        pass

    @abstractmethod
    def testlabel(self) -> str:
        """Short name of the kind of test."""
        pass

    def terms(self) -> OrderedSet:
        """Literal forms or lemmas this test requires, if any."""
        return OrderedSet()

    def __str__(self):
        return self.label()


class AnyTokenTest(TokenTest):
    """Matches any occurrence: '*'."""

    def matches(self, occ):
        return True

    def label(self):
        return "*"

    def testlabel(self):
        return "ANY"


class GapTokenTest(TokenTest):
    """
    Bounded skip, '**' or '**N'.  Not a predicate on its own: the matcher
    consults the test that follows the gap and uses budget only to know
    how many occurrences may be skipped.  Taken alone it accepts anything,
    which is how a trailing gap behaves.
    """
    budget: int

    def __init__(self, budget: int = DEFAULT_GAP_BUDGET, **kwargs):
        super().__init__(**kwargs)
        self.budget = budget

    def matches(self, occ):
        return True

    def label(self):
        if self.budget == DEFAULT_GAP_BUDGET:
            return "**"
        return "**%d" % self.budget

    def testlabel(self):
        return "GAP"


class CategoryTokenTest(TokenTest):
    """Exact category code."""
    code: int
    quoted: bool

    def __init__(self, code: int, quoted: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.code = code
        self.quoted = quoted

    def matches(self, occ):
        return occ.category == self.code

    def label(self):
        name = categories.label(self.code) or "NULL"
        if self.quoted:
            return '"%s"' % name
        return name

    def testlabel(self):
        return "TAG"


class CategoryGroupTokenTest(TokenTest):
    """Any code of a category family."""
    code: int

    def __init__(self, code: int, **kwargs):
        super().__init__(**kwargs)
        self.code = categories.group_of(code)

    def matches(self, occ):
        return categories.group_of(occ.category) == self.code

    def label(self):
        return categories.label(self.code)

    def testlabel(self):
        return "GROUP"


class FilterTokenTest(TokenTest):
    """Any code accepted by a CategoryFilter: '[VERB ADJ PROpers]'."""
    filter: CategoryFilter
    names: List[str]

    def __init__(self, filter: CategoryFilter, names: Sequence[str], **kwargs):
        super().__init__(**kwargs)
        self.filter = filter
        self.names = list(names)

    def matches(self, occ):
        return self.filter.accept(occ.category)

    def label(self):
        return "[%s]" % " ".join(self.names)

    def testlabel(self):
        return "FILTER"


def glob_to_regex(glob: str):
    """Compile a glob where '*' stands for any run of characters, anchored
    at both ends.  No other character is special."""
    return re.compile('.*'.join(re.escape(part) for part in glob.split('*')), re.DOTALL)


class FormTokenTest(TokenTest):
    """Normalized form, exact or as a '*' glob; case sensitive.
    A quoted form is always exact."""
    form: str
    glob: bool
    quoted: bool

    def __init__(self, form: str, glob: bool = True, quoted: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.form = form
        self.quoted = quoted
        self.glob = glob and not quoted and '*' in form
        self.compiled_re = glob_to_regex(form) if self.glob else None

    def matches(self, occ):
        if self.glob:
            return self.compiled_re.fullmatch(occ.orth) is not None
        return occ.orth == self.form

    def label(self):
        if self.quoted:
            return '"%s"' % self.form
        return self.form

    def testlabel(self):
        return "GLOB" if self.glob else "FORM"

    def terms(self):
        if self.glob:
            return OrderedSet()
        return OrderedSet([self.form])


class LemmaTokenTest(TokenTest):
    lemma: str

    def __init__(self, lemma: str, **kwargs):
        super().__init__(**kwargs)
        self.lemma = lemma

    def matches(self, occ):
        return occ.lemma == self.lemma

    def label(self):
        return self.lemma

    def testlabel(self):
        return "LEM"

    def terms(self):
        return OrderedSet([self.lemma])


class FormCategoryTokenTest(TokenTest):
    """Conjunction of a form test and a category (or group) test: 'aim*/VERB'."""
    form_test: FormTokenTest
    category_test: TokenTest

    def __init__(self, form_test: FormTokenTest, category_test: TokenTest, **kwargs):
        super().__init__(**kwargs)
        self.form_test = form_test
        self.category_test = category_test

    def matches(self, occ):
        return self.form_test.matches(occ) and self.category_test.matches(occ)

    def label(self):
        return "%s/%s" % (self.form_test.label(), self.category_test.label())

    def testlabel(self):
        return "AND"

    def terms(self):
        return self.form_test.terms()


class OrTest(TokenTest):
    """True if any sub-test matches, tried in order."""
    subs: List[TokenTest]  # at least 2

    def __init__(self, subs: Iterable[TokenTest], **kwargs):
        super().__init__(**kwargs)
        self.subs = list(subs)

    def matches(self, occ):
        for test in self.subs:
            if test.matches(occ):
                return True
        return False

    def label(self):
        return "(%s)" % ", ".join(s.label() for s in self.subs)

    def testlabel(self):
        return "OR"

    def terms(self):
        terms = OrderedSet()
        for test in self.subs:
            terms |= test.terms()
        return terms

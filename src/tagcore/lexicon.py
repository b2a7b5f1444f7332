from typing import Any, Dict, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

from . import categories
from .dbfutil import GenericException
from .tokenizer import FrenchTokenizer

"""
Provides Lexicon, a read-only (once loaded) lookup of forms and locutions
with their lemma and category.
Entries are tokenized with the FrenchTokenizer and stored in a prefix tree
of LexiconNodes, so that multi-word locutions ("parce que", "tout à fait")
can be matched against a run of occurrences.
"""


class LexiconEntry(NamedTuple):
    form: str
    lemma: str
    category: int


class LexiconNode(object):
    """A node carrying a payload corresponds to a complete entry,
    as opposed to just a prefix of one."""

    def __init__(self):
        self.payload: Optional[LexiconEntry] = None
        self.children: Dict[str, 'LexiconNode'] = {}


class Lexicon(object):
    """
    Forms and locutions with their lemma and category code.
    If case_insensitive is true, entries and looked-up forms are lowercased;
    otherwise a lookup that fails on the form as written is retried on its
    lowercase variant (sentence-initial capitals).
    """

    def __init__(self, entries: Iterable[Tuple[str, str, Any]] = (), case_insensitive: bool = False):
        self._lexicon = LexiconNode()  # root of tree
        self._size = 0
        self.case_insensitive = case_insensitive
        for form, lemma, category in entries:
            self.add(form, lemma, category)

    def add(self, form: str, lemma: str = "", category: Any = categories.UNKNOWN) -> None:
        """Enter one form or locution. category may be a code or a category name."""
        if isinstance(category, str):
            if not categories.is_known(category):
                raise GenericException(msg="Unknown category '%s' for lexicon entry '%s'" % (category, form))
            category = categories.code(category)
        if self.case_insensitive:
            form = form.lower()
        tokens = [occ.orth for occ in FrenchTokenizer(form, markup=False, skip_tei_header=False)]
        if not tokens:
            raise GenericException(msg="Empty lexicon entry")
        node = self._lexicon
        for tok in tokens:
            try:
                node = node.children[tok]
            except KeyError:
                node.children[tok] = LexiconNode()
                node = node.children[tok]
        if node.payload is None:
            self._size += 1
        lemma = lemma or " ".join(tokens)
        node.payload = LexiconEntry(" ".join(tokens), lemma, category)

    def load_from_strings(self, name: str, strings: Iterable[str]) -> None:
        """Load lines of the form 'form;lemma;CATEGORY'. Lemma and category
        may be omitted; blank lines and lines starting with '#' are skipped."""
        for lineno, line in enumerate(strings, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            fields = [f.strip() for f in line.split(';')]
            if len(fields) > 3:
                raise GenericException(msg="Malformed lexicon line %d in %s: '%s'" % (lineno, name, line))
            fields += [""] * (3 - len(fields))
            form, lemma, category = fields
            self.add(form, lemma, category or categories.UNKNOWN)

    def _key(self, form: str) -> str:
        return form.lower() if self.case_insensitive else form

    def entry(self, form: str) -> Optional[LexiconEntry]:
        """Single-word lookup."""
        node = self._lexicon.children.get(self._key(form))
        if (node is None or node.payload is None) and not self.case_insensitive:
            node = self._lexicon.children.get(form.lower())
        if node is None:
            return None
        return node.payload

    def lemma(self, form: str) -> Optional[str]:
        entry = self.entry(form)
        return None if entry is None else entry.lemma

    def category(self, form: str) -> int:
        entry = self.entry(form)
        return categories.UNKNOWN if entry is None else entry.category

    def matches(self, forms: Sequence[str], at: int = 0, end: Optional[int] = None) -> Iterator[Tuple[int, LexiconEntry]]:
        """Generator matching forms starting at 'at' and yielding tuple pairs of
        the index the match ends at (exclusive end), and the entry."""
        node: LexiconNode = self._lexicon
        if end is None:
            end = len(forms)
        while at < end:
            tok = self._key(forms[at])
            next_node = node.children.get(tok)
            if next_node is None and node is self._lexicon and not self.case_insensitive:
                next_node = node.children.get(tok.lower())
            if next_node is None:
                break
            if next_node.payload is not None:
                yield at + 1, next_node.payload
            node = next_node
            at += 1

    def longest_match(self, forms: Sequence[str], at: int = 0) -> Optional[Tuple[int, LexiconEntry]]:
        result = None
        for result in self.matches(forms, at):
            pass
        return result

    def __contains__(self, form):
        return self.entry(form) is not None

    def __len__(self):
        return self._size

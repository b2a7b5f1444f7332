from typing import Iterable, List, Optional
import unittest

from tagcore import categories
from tagcore.lexicon import Lexicon
from tagcore.occurrence import Occurrence
from tagcore.tagger import LexiconTagger
from tagcore.tokenizer import OccurrenceSequence
from taggrep.manager import GrepManager
from taggrep.match import OccurrenceMatch


def symbol_stream(symbols: str, categories_by_symbol=None) -> List[Occurrence]:
    """Occurrences for a space separated string of symbols, as if each were
    a word of a text. categories_by_symbol optionally maps symbols to codes."""
    occurrences = []
    at = 0
    for symbol in symbols.split():
        category = categories.NULL
        if categories_by_symbol is not None:
            category = categories_by_symbol.get(symbol, categories.UNKNOWN)
        occurrences.append(Occurrence.from_graph(symbol, at, category=category))
        at += len(symbol) + 1
    return occurrences


class GrepTest(unittest.TestCase):
    """Base class for tests that run named patterns over texts.
    Texts are tagged with a LexiconTagger, so no spacy model is needed."""

    lexicon_lines: Iterable[str] = ()

    def setUp(self):
        self.lexicon = Lexicon()
        self.lexicon.load_from_strings("test", self.lexicon_lines)
        self.grm = GrepManager(lexicon=self.lexicon, tagger=LexiconTagger(self.lexicon))

    def parse_block(self, block: str) -> None:
        self.grm.forget()
        self.grm.parse_block(block)

    def seq_from_text(self, text: str) -> OccurrenceSequence:
        return self.grm.sequence(text)

    def matches(self, patname: str, text: str) -> List[OccurrenceMatch]:
        return list(self.grm.scan(patname, text))

    def matches_stream(self, patname: str, occurrences: List[Occurrence]) -> List[OccurrenceMatch]:
        return list(self.grm.scan_occurrences(patname, occurrences))

    def match_texts(self, patname: str, text: str) -> List[str]:
        return [m.matching_text() for m in self.matches(patname, text)]

    def extents(self, patname: str, occurrences: List[Occurrence]) -> List[tuple]:
        return [m.get_extent() for m in self.matches_stream(patname, occurrences)]

    def match_count(self, patname: str, text: str, start: int = 0, end: Optional[int] = None) -> int:
        return len(list(self.grm.scan(patname, text, start, end)))

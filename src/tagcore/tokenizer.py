import logging
from typing import Iterator, List, Optional
import unicodedata

from .dbfutil import GenericException, SimpleClass, file_contents
from .occurrence import Occurrence


_logger = logging.getLogger(f"{__name__}.<module>")


class TokenizeError(GenericException):
    """Tokenization failure.  FrenchTokenizer itself accepts any input."""


# Word-internal characters that Unicode classes as punctuation.
WORD_PUNCTUATION = frozenset("-'’_")

APOSTROPHES = frozenset("'’")

# A word ending in one of these, followed by an apostrophe, is cut right
# after the apostrophe: "qu'il" -> "qu'", "il".
ELISIONS = frozenset((
    "c", "C", "d", "D", "j", "J", "jusqu", "Jusqu", "l", "L", "lorsqu", "Lorsqu",
    "m", "M", "n", "N", "puisqu", "Puisqu", "qu", "Qu", "quoiqu", "Quoiqu",
    "s", "S", "t", "T",
))

# Enclitic words that a hyphen detaches from the preceding verb:
# "direz-vous" -> "direz", "-", "vous".
HYPHEN_BREAK_BEFORE = frozenset((
    "ce", "ci", "elle", "elles", "en", "eux", "il", "ils", "je", "Je", "la", "là",
    "le", "les", "leur", "lui", "m'", "me", "moi", "nous", "on", "t", "te", "toi",
    "tu", "vous", "y",
))

# Token for the euphonic t between a verb and its subject pronoun.
EUPHONIC_T = "-t-"

TEI_HEADER_END = "</teiHeader>"


def is_space(c: str) -> bool:
    return c.isspace() or unicodedata.category(c) == "Cc"


def is_punctuation(c: str) -> bool:
    if c in WORD_PUNCTUATION:
        return False
    return unicodedata.category(c).startswith("P")


def is_letter(c: str) -> bool:
    return c.isalpha()


def is_word(c: str) -> bool:
    if c in WORD_PUNCTUATION:
        return True
    return unicodedata.category(c)[0] in "LMN"


class FrenchTokenizer(SimpleClass):
    """
    Lazy tokenizer for French text.  Each call to next_occurrence() scans
    forward to the next token and returns it as an Occurrence, or None when
    the text (or the end bound) is exhausted.  Instances are forward-only;
    scanning the same text again needs a new tokenizer.

    Options (keyword arguments):
      markup          - skip <...> markup (default True)
      skip_tei_header - start after </teiHeader> if present (default True)
    """

    text: str
    markup: bool
    skip_tei_header: bool

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None, **args):
        super().__init__(**args)
        self._default('markup', True)
        self._default('skip_tei_header', True)
        if end is None or end > len(text):
            end = len(text)
        # The appended space bounds a token that runs to the end bound.
        self.text = text[:end] + ' '
        self.end = end
        self.pointer = max(0, start)
        self.in_markup = False
        if self.skip_tei_header:
            pos = text.find(TEI_HEADER_END, 0, end)
            if pos >= 0 and pos + len(TEI_HEADER_END) > self.pointer:
                self.pointer = pos + len(TEI_HEADER_END)

    def __iter__(self) -> Iterator[Occurrence]:
        return self

    def __next__(self) -> Occurrence:
        occ = self.next_occurrence()
        if occ is None:
            raise StopIteration
        return occ

    def _forward(self) -> Optional[str]:
        """Move the pointer to the next character that can start a token."""
        text = self.text
        while self.pointer < self.end:
            c = text[self.pointer]
            if self.in_markup:
                if c == '>':
                    self.in_markup = False
            elif c == '<' and self.markup:
                self.in_markup = True
            elif not is_space(c):
                return c
            self.pointer += 1
        return None

    def _breaks_word(self, c: str) -> bool:
        return is_space(c) or is_punctuation(c) or (self.markup and c == '<')

    def _enclitic_after(self, hyphen: int) -> bool:
        """Is the hyphen at this position followed by an enclitic word?"""
        text = self.text
        i = hyphen + 1
        while is_letter(text[i]):
            i += 1
        word = text[hyphen + 1:i]
        if text[i] in APOSTROPHES:
            return (word + "'") in HYPHEN_BREAK_BEFORE
        # Euphonic t: "a-t-il", "va-t-en".
        if word == "t" and text[i] == '-':
            return self._enclitic_after(i)
        # "arc-en-ciel" stays whole.
        if is_word(text[i]):
            return False
        return word in HYPHEN_BREAK_BEFORE

    def next_occurrence(self) -> Optional[Occurrence]:
        c = self._forward()
        if c is None:
            return None
        text = self.text
        start = self.pointer

        if is_punctuation(c):
            while is_punctuation(text[self.pointer]):
                self.pointer += 1
            return self._occurrence(start)

        while True:
            if c in APOSTROPHES:
                if text[start:self.pointer] in ELISIONS:
                    self.pointer += 1
                    return self._occurrence(start)
            elif c == '-' and self._enclitic_after(self.pointer):
                if self.pointer == start:
                    self.pointer += 3 if text.startswith(EUPHONIC_T, start) else 1
                # Otherwise the hyphen starts the next token.
                return self._occurrence(start)
            self.pointer += 1
            c = text[self.pointer]
            if self._breaks_word(c):
                break
        return self._occurrence(start)

    def _occurrence(self, start: int) -> Occurrence:
        return Occurrence.from_graph(self.text[start:self.pointer], start)

    def occurrences(self) -> List[Occurrence]:
        """Remaining occurrences, as a list."""
        return list(self)


class OccurrenceSequence(SimpleClass):
    """
    Materialized tokenization of a text.
    text        - the source text
    occurrences - list of Occurrence, in text order
    """

    text: str
    occurrences: List[Occurrence]

    def __init__(self, **args):
        super().__init__(**args)
        if not hasattr(self, 'occurrences'):
            self.occurrences = []

    def __len__(self):
        return len(self.occurrences)

    def __getitem__(self, i):
        return self.occurrences[i]

    def __iter__(self):
        return iter(self.occurrences)

    def forms(self) -> List[str]:
        return [occ.orth for occ in self.occurrences]

    def spans(self):
        return [(occ.start, occ.end) for occ in self.occurrences]

    def __str__(self):
        return " ".join(str(occ) for occ in self.occurrences)


def tokenize(text: str, start: int = 0, end: Optional[int] = None, **args) -> OccurrenceSequence:
    tokenizer = FrenchTokenizer(text, start, end, **args)
    occurrences = tokenizer.occurrences()
    _logger.debug("Tokenized %d characters into %d occurrences", len(text), len(occurrences))
    return OccurrenceSequence(text=text, occurrences=occurrences)


def tokens_in_file(fname: str, **args) -> OccurrenceSequence:
    return tokenize(file_contents(fname), **args)

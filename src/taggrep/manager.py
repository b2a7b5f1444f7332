import logging
import re
from typing import Dict, Iterable, Iterator, List, Optional

from tagcore.dbfutil import GenericException, SimpleClass
from tagcore.lexicon import Lexicon
from tagcore.occurrence import Occurrence
from tagcore.tagger import Tagger
from tagcore.tokenizer import FrenchTokenizer, OccurrenceSequence

from .expression import PatternExpression
from .match import OccurrenceMatch
from .matcher import StreamMatcher
from .pattern import CompiledPattern


_logger = logging.getLogger(f"{__name__}.<module>")


class GrepManager(SimpleClass):
    """
    Holds a set of named compiled patterns and applies them to texts:
    each text is tokenized, tagged by the tagger if there is one, and
    streamed through a fresh StreamMatcher.

    Pattern blocks hold one statement per line:
        name -> pattern
    Blank lines and lines starting with '#' are ignored.
    """

    STATEMENT_RE = re.compile(r'\s*(\w+(?:\.\w+)*)\s*->\s*(.*?)\s*$')

    lexicon: Optional[Lexicon]
    tagger: Optional[Tagger]
    exception_on_redefinition: bool
    markup: bool
    skip_tei_header: bool
    patterns: Dict[str, CompiledPattern]
    pattern_file: Optional[str]

    def __init__(self, lexicon: Optional[Lexicon] = None, tagger: Optional[Tagger] = None, **kwargs):
        super().__init__(**kwargs)
        self.lexicon = lexicon
        self.tagger = tagger
        self._default('exception_on_redefinition', False)
        self._default('markup', True)
        self._default('skip_tei_header', True)
        self._default('pattern_file', None)
        self.forget()

    def __str__(self):
        return f"GrepManager({len(self.patterns)} patterns)"

    def forget(self, *names) -> None:
        """With no args, drop all patterns. With args, drop the named ones."""
        if len(names) == 0:
            self.patterns = {}
            return
        for name in names:
            self.patterns.pop(name, None)

    ###########################################################################
    # INGESTING PATTERNS
    #

    def add_pattern(self, name: str, expr: str) -> CompiledPattern:
        """Compile expr and record it under name. CompileErrors propagate."""
        if self.exception_on_redefinition and name in self.patterns:
            raise GenericException(msg="Pattern '%s' is already defined" % name)
        pattern = PatternExpression(expr, self.lexicon).compile()
        self.patterns[name] = pattern
        _logger.debug("Defined %s -> %s", name, pattern.label())
        return pattern

    def parse_block(self, block: str) -> None:
        for lineno, line in enumerate(block.splitlines(), 1):
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            m = self.STATEMENT_RE.match(line)
            if not m:
                raise GenericException(msg="Line %d: not a 'name -> pattern' statement: '%s'"
                                           % (lineno, line.strip()))
            self.add_pattern(m.group(1), m.group(2))

    def parse_file(self, fname: str) -> None:
        self.pattern_file = fname
        self.parse_block(self.file_contents(fname))

    def lookup(self, name: str) -> CompiledPattern:
        try:
            return self.patterns[name]
        except KeyError:
            raise GenericException(msg="Unknown pattern '%s'" % name)

    def pattern_names(self) -> List[str]:
        return list(self.patterns.keys())

    ###########################################################################
    # APPLYING PATTERNS
    #

    def occurrences(self, text: str, start: int = 0, end: Optional[int] = None) -> Iterator[Occurrence]:
        """Tokenized, and tagged if there is a tagger, occurrences of text."""
        tokenizer = FrenchTokenizer(text, start, end, markup=self.markup,
                                    skip_tei_header=self.skip_tei_header)
        if self.tagger is None:
            return tokenizer
        return self.tagger.tag(tokenizer, text)

    def sequence(self, text: str, start: int = 0, end: Optional[int] = None) -> OccurrenceSequence:
        return OccurrenceSequence(text=text, occurrences=list(self.occurrences(text, start, end)))

    def scan_occurrences(self, patname: str, occurrences: Iterable[Occurrence],
                         source: Optional[str] = None) -> Iterator[OccurrenceMatch]:
        """Generate all matches of the named pattern in an occurrence stream."""
        matcher = StreamMatcher(self.lookup(patname))
        for m in matcher.scan(occurrences, name=patname, source=source):
            yield m

    def scan(self, patname: str, text: str, start: int = 0, end: Optional[int] = None) -> Iterator[OccurrenceMatch]:
        """
        Generate a sequence of *all* matches in the text
        within the indicated start/end character range.
        """
        for m in self.scan_occurrences(patname, self.occurrences(text, start, end), source=text):
            yield m

    def search(self, patname: str, text: str, start: int = 0, end: Optional[int] = None) -> Optional[OccurrenceMatch]:
        """Return the *first* match, or None if none."""
        for m in self.scan(patname, text, start, end):
            return m
        return None

    def match_count(self, patname: str, text: str) -> int:
        return sum(1 for _ in self.scan(patname, text))

from functools import total_ordering
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tagcore.dbfutil import GenericException
from tagcore.occurrence import Occurrence

"""
OccurrenceMatch records one match of a pattern in an occurrence stream:
the matched occurrences plus their [begin, end) index extent in the stream.
"""


class SourceMismatchException(Exception):
    """Indicates non-meaningful comparison operation on matches
    from different sources."""
    def __init__(self, this: 'OccurrenceMatch', other: 'OccurrenceMatch',
                 message="Can't compare extents of matches from different sources (except for equality, which is never True)"):
        super().__init__(message)
        self.this = this
        self.other = other


# Type returned by get_extent().
Extent = Tuple[int, int]


@total_ordering
class OccurrenceMatch(object):
    """
    A match has the following core member variables:
      occurrences: the matched occurrences, in stream order
      begin: the stream index of the first matched occurrence
      end: the stream index just after the last matched occurrence
      name: the name of the pattern, when it was looked up by name
      source: the text the occurrences come from (compared by identity)
    """

    def __init__(self, occurrences: Sequence[Occurrence], begin: int, end: int,
                 name: Optional[str] = None, source: Optional[str] = None):
        if end - begin != len(occurrences):
            raise GenericException(msg="Match extent %d-%d doesn't fit %d occurrences"
                                       % (begin, end, len(occurrences)))
        self.occurrences = tuple(occurrences)
        self.begin = begin
        self.end = end
        self.name = name
        self.source = source

    def get_extent(self) -> Extent:
        return self.begin, self.end

    def __len__(self):
        return len(self.occurrences)

    def __lt__(self, other):
        """
        Self is less than other if self begins at an earlier occurrence than
        other, or if they begin at the same occurrence and self ends earlier.
        Raises exception if matches are from different sources.
        """
        if not isinstance(other, OccurrenceMatch):
            raise GenericException(msg=f"Comparing {type(self)} to {type(other)}")
        if other.source is not self.source:
            raise SourceMismatchException(self, other)
        b, e = self.get_extent()
        ob, oe = other.get_extent()
        if b == ob:
            return e < oe
        else:
            return b < ob

    def __eq__(self, other):
        """
        Two matches are equal if they are from the same source (by id)
        and cover the same extent.
        """
        if other is None:
            return False
        if not isinstance(other, OccurrenceMatch):
            raise GenericException(msg=f"Comparing {type(self)} to {type(other)}")
        if other.source is not self.source:
            return False
        return self.get_extent() == other.get_extent()

    def __hash__(self):
        b, e = self.get_extent()
        return hash((id(self.source), b, e))

    def overlaps(self, other):
        """
        Matches overlap if they have at least one occurrence (by position) in common.
        Raises exception if matches are from different sources (by id).
        """
        if other.source is not self.source:
            raise SourceMismatchException(self, other)
        b, e = self.get_extent()
        ob, oe = other.get_extent()
        return b <= ob < e or b < oe <= e or ob <= b < oe or ob < e <= oe

    def covers(self, index1, index2=None):
        b, e = self.get_extent()
        if not (b <= index1 < e):
            return False
        if index2 is None:
            return True
        return b < index2 <= e

    def start_offset(self) -> int:
        """The leftmost character offset of the match."""
        return self.occurrences[0].start

    def end_offset(self) -> int:
        """The (exclusive) character right offset of the match."""
        return self.occurrences[-1].end

    def matching_text(self) -> str:
        """The source text spanned by the match, skipped occurrences included.
        Without a source, the matched forms joined by spaces."""
        if self.source is None:
            return " ".join(self.forms())
        return self.source[self.start_offset():self.end_offset()]

    def forms(self) -> List[str]:
        return [occ.orth for occ in self.occurrences]

    def as_json_serializable(self) -> Dict[str, Any]:
        return dict(name=self.name,
                    begin=self.begin,
                    end=self.end,
                    start_offset=self.start_offset(),
                    end_offset=self.end_offset(),
                    text=self.matching_text(),
                    occurrences=[dict(form=o.graph, lemma=o.lemma, category=o.category)
                                 for o in self.occurrences])

    def as_json(self) -> str:
        return json.dumps(self.as_json_serializable(), ensure_ascii=False)

    def __str__(self):
        typ = type(self).__name__
        if self.name is not None:
            return "%s([%s],%d,%d,%s)" % (typ, self.name, self.begin, self.end, self.matching_text())
        else:
            return "%s(%d,%d,%s)" % (typ, self.begin, self.end, self.matching_text())

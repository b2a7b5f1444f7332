import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from tagcore.occurrence import Occurrence

from .match import OccurrenceMatch
from .pattern import CompiledPattern


_logger = logging.getLogger(f"{__name__}.<module>")


class StreamMatcher(object):
    """
    Runs one CompiledPattern over a stream of occurrences, one test() call
    per occurrence, in a single forward pass.

    The matcher is either at the root (no attempt in progress) or positioned
    on a node of the pattern, with the occurrences accepted so far in a
    buffer.  When the current node rejects an occurrence the attempt is
    dropped and the same occurrence is tried against the root, so a match
    can start where a failed one broke off ("A B C" is found in "A B A B C").
    On a gap node the matcher tries the node after the gap, and otherwise
    skips the occurrence while the gap's budget lasts.  Once the budget is
    spent the attempt is dropped and the occurrence is tried against the
    root, as on a rejection.  A completed match is left in found and the
    matcher goes back to the root.

    Remaining gap budgets are kept here, keyed by gap node index, so one
    CompiledPattern can be shared by any number of matchers.  A matcher
    itself holds the state of a single scan.
    """

    def __init__(self, pattern: CompiledPattern):
        self.pattern = pattern
        self._current: Optional[int] = None
        self._buffer: List[Occurrence] = []
        self._budgets: Dict[int, int] = {}
        self.found: Tuple[Occurrence, ...] = ()

    @property
    def at_root(self) -> bool:
        return self._current is None

    @property
    def current(self) -> Optional[int]:
        """Index of the node awaiting the next occurrence, None at the root."""
        return self._current

    def pending(self) -> Tuple[Occurrence, ...]:
        """Occurrences of the attempt in progress."""
        return tuple(self._buffer)

    def reset(self) -> None:
        self._current = None
        self._buffer = []
        self._budgets.clear()

    def test(self, occ: Occurrence) -> bool:
        """Feed the next occurrence; True when it completes a match."""
        if self._current is None:
            return self._start(occ)
        node = self.pattern[self._current]
        if node.is_gap():
            return self._in_gap(self._current, occ)
        matched, nxt = self._advance(self._current, occ)
        if matched:
            self._buffer.append(occ)
            return self._move(nxt)
        self.reset()
        return self._start(occ)

    def _start(self, occ: Occurrence) -> bool:
        matched, nxt = self._advance(self.pattern.root, occ)
        if not matched:
            return False
        self._buffer = [occ]
        return self._move(nxt)

    def _advance(self, index: int, occ: Occurrence) -> Tuple[bool, Optional[int]]:
        """Try the node at index; on success, also return the node that
        follows.  Alternatives are tried in order, first success wins."""
        node = self.pattern[index]
        if node.is_alternation():
            for child in node.children:
                matched, nxt = self._advance(child, occ)
                if matched:
                    return True, nxt
            return False, None
        if node.test.matches(occ):
            return True, node.next
        return False, None

    def _in_gap(self, index: int, occ: Occurrence) -> bool:
        node = self.pattern[index]
        if node.next is None:
            # A trailing gap takes one more occurrence of any kind.
            self._buffer.append(occ)
            return self._move(None)
        matched, nxt = self._advance(node.next, occ)
        if matched:
            self._buffer.append(occ)
            return self._move(nxt)
        remaining = self._budgets.get(index, node.test.budget)
        if remaining > 0:
            self._buffer.append(occ)
            self._budgets[index] = remaining - 1
            return False
        self.reset()
        return self._start(occ)

    def _move(self, nxt: Optional[int]) -> bool:
        if nxt is None:
            self.found = tuple(self._buffer)
            self.reset()
            return True
        self._current = nxt
        node = self.pattern[nxt]
        if node.is_gap():
            self._budgets[nxt] = node.test.budget
        return False

    def scan(self, occurrences: Iterable[Occurrence], name: Optional[str] = None,
             source: Optional[str] = None) -> Iterator[OccurrenceMatch]:
        """Generate the matches in a stream, starting from a clean state.
        Match extents are occurrence indices within the stream."""
        self.reset()
        count = 0
        for i, occ in enumerate(occurrences):
            if self.test(occ):
                end = i + 1
                count += 1
                yield OccurrenceMatch(self.found, end - len(self.found), end, name=name, source=source)
        _logger.debug("Pattern '%s' matched %d times", self.pattern.expr, count)

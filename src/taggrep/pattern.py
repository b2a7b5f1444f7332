from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from ordered_set import OrderedSet

from .tokentest import GapTokenTest, TokenTest

"""
Compiled patterns.

A CompiledPattern owns a tuple of PatternNodes addressed by index, with the
root at index 0.  A node names its successor by index (None at the end of
the pattern).  An alternation node lists the heads of its alternative
sub-chains in children; the last node of each sub-chain has the
alternation's successor as its own successor, so a sub-chain rejoins the
main chain without any back link.  Nothing in a CompiledPattern changes
after compilation; run-time state such as remaining gap budgets is kept by
the StreamMatcher.
"""


class PatternNode(NamedTuple):
    test: TokenTest
    next: Optional[int]
    children: Tuple[int, ...] = ()
    position: int = -1  # offset of the construct in the pattern text

    def is_gap(self) -> bool:
        return isinstance(self.test, GapTokenTest)

    def is_alternation(self) -> bool:
        return len(self.children) > 0


class CompiledPattern(object):

    ROOT = 0

    def __init__(self, nodes: Sequence[PatternNode], expr: str = ""):
        self.nodes: Tuple[PatternNode, ...] = tuple(nodes)
        self.expr = expr

    @property
    def root(self) -> int:
        return self.ROOT

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index: int) -> PatternNode:
        return self.nodes[index]

    def gap_nodes(self) -> List[int]:
        return [i for i, node in enumerate(self.nodes) if node.is_gap()]

    def chain(self, index: Optional[int] = ROOT, stop: Optional[int] = None) -> Iterator[int]:
        """Indices along a chain, from index up to (not including) stop."""
        while index is not None and index != stop:
            yield index
            index = self.nodes[index].next

    def _label(self, index: Optional[int], stop: Optional[int]) -> str:
        parts = []
        for i in self.chain(index, stop):
            node = self.nodes[i]
            if node.is_alternation():
                alts = [self._label(c, node.next) for c in node.children]
                parts.append("(%s)" % ", ".join(alts))
            else:
                parts.append(node.test.label())
        return " ".join(parts)

    def label(self) -> str:
        """The pattern, rewritten from its compiled form."""
        return self._label(self.ROOT, None)

    def terms(self) -> OrderedSet:
        """Literal forms and lemmas mentioned anywhere in the pattern."""
        terms = OrderedSet()
        for node in self.nodes:
            if not node.is_alternation():
                terms |= node.test.terms()
        return terms

    def dump(self, indent=0):
        for i, node in enumerate(self.nodes):
            succ = "END" if node.next is None else node.next
            if node.is_alternation():
                print("%s%d: ALT %s -> %s" % ((' ' * indent), i, list(node.children), succ))
            else:
                print("%s%d: %s %s -> %s" % ((' ' * indent), i, node.test.testlabel(), node.test.label(), succ))

    def __str__(self):
        return self.label()

    def __repr__(self):
        return "CompiledPattern(%r)" % self.label()

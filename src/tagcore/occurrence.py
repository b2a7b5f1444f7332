from typing import NamedTuple, Optional

from . import categories


def normalize(graph: str) -> str:
    """Orthographic form used for matching: typographic apostrophes become '."""
    return graph.replace('’', "'")


class Occurrence(NamedTuple):
    """
    One token of a text.
      graph: the slice of the source text, as written
      orth: the normalized form, the one patterns are matched against
      lemma: the lemma, "" while unresolved
      category: a category code (see tagcore.categories)
      start, end: character offsets of graph in the source text
    """
    graph: str
    orth: str
    lemma: str
    category: int
    start: int
    end: int

    @classmethod
    def from_graph(cls, graph: str, start: int,
                   lemma: str = "", category: int = categories.NULL) -> 'Occurrence':
        return cls(graph, normalize(graph), lemma, category, start, start + len(graph))

    def with_tags(self, lemma: Optional[str] = None, category: Optional[int] = None) -> 'Occurrence':
        """Copy of this occurrence with lemma and/or category replaced."""
        changes = {}
        if lemma is not None:
            changes['lemma'] = lemma
        if category is not None:
            changes['category'] = category
        return self._replace(**changes)

    def __str__(self):
        cat = categories.label(self.category)
        if cat:
            return "%s/%s" % (self.orth, cat)
        return self.orth

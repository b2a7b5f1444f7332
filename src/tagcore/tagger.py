import logging
import os
from typing import Dict, Iterable, Iterator, List, Optional

from . import categories
from .dbfutil import GenericException
from .lexicon import Lexicon
from .occurrence import Occurrence
from .tokenizer import is_punctuation


_logger = logging.getLogger(f"{__name__}.<module>")


SENTENCE_PUNCTUATION = frozenset(".?!…")
CLAUSE_PUNCTUATION = frozenset(",;:()—–")

# Universal POS tags to category codes.
UPOS_CATEGORIES: Dict[str, int] = {
    "ADJ": categories.ADJ,
    "ADP": categories.PREP,
    "ADV": categories.ADV,
    "AUX": categories.VERBaux,
    "CCONJ": categories.CONJcoord,
    "DET": categories.DET,
    "INTJ": categories.EXCL,
    "NOUN": categories.SUB,
    "NUM": categories.NUM,
    "PART": categories.ADVneg,
    "PRON": categories.PRO,
    "PROPN": categories.NAME,
    "PUNCT": categories.PUN,
    "SCONJ": categories.CONJsubord,
    "SYM": categories.MATH,
    "VERB": categories.VERB,
    "X": categories.MISC,
    "SPACE": categories.NULL,
}

# PronType morphological feature, for determiners and pronouns.
PRONTYPE_CATEGORIES: Dict[str, Dict[str, int]] = {
    "DET": {
        "Art": categories.DETart,
        "Dem": categories.DETdem,
        "Int": categories.DETinter,
        "Ind": categories.DETindef,
    },
    "PRON": {
        "Prs": categories.PROpers,
        "Rel": categories.PROrel,
        "Int": categories.PROint,
        "Dem": categories.PROdem,
        "Ind": categories.PROindef,
    },
}


class Tagger(object):
    """Base class for taggers, which fill in the lemma and category
    of the occurrences produced by a tokenizer."""

    def tag(self, occurrences: Iterable[Occurrence], text: str) -> Iterator[Occurrence]:
        """Generate re-tagged copies of occurrences, in order.
        text is the source the occurrences' offsets refer to."""
        raise NotImplementedError()


def punctuation_category(graph: str) -> int:
    if graph[0] in SENTENCE_PUNCTUATION:
        return categories.PUNsent
    if graph[0] in CLAUSE_PUNCTUATION:
        return categories.PUNcl
    return categories.PUN


class LexiconTagger(Tagger):
    """
    Dictionary tagging: locutions and words found in the lexicon take its
    lemma and category; punctuation and numbers are recognized by their
    characters; an unknown capitalized word is taken as a proper name.
    Works without a lexicon, in which case only the character rules apply.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon

    def tag(self, occurrences: Iterable[Occurrence], text: str = None) -> Iterator[Occurrence]:
        occurrences = list(occurrences)
        forms = [occ.orth for occ in occurrences]
        i = 0
        while i < len(occurrences):
            occ = occurrences[i]
            match = None
            if self.lexicon is not None and not is_punctuation(occ.orth[0]):
                match = self.lexicon.longest_match(forms, i)
            if match is None:
                yield self.tag_occurrence(occ)
                i += 1
                continue
            end, entry = match
            for j in range(i, end):
                yield occurrences[j].with_tags(lemma=entry.lemma, category=entry.category)
            i = end

    def tag_occurrence(self, occ: Occurrence) -> Occurrence:
        """Character rules, for an occurrence the lexicon does not know."""
        first = occ.orth[0]
        if is_punctuation(first):
            return occ.with_tags(lemma=occ.orth, category=punctuation_category(occ.orth))
        if first.isdigit():
            return occ.with_tags(lemma=occ.orth, category=categories.DETnum)
        if first.isupper():
            return occ.with_tags(lemma=occ.orth, category=categories.NAME)
        return occ.with_tags(category=categories.UNKNOWN)


def category_for(pos: str, morph) -> int:
    """Category code for a spaCy coarse POS and morphological analysis."""
    code = UPOS_CATEGORIES.get(pos, categories.UNKNOWN)
    if pos == "VERB" and "Part" in morph.get("VerbForm"):
        tense = morph.get("Tense")
        if "Past" in tense:
            return categories.VERBppass
        if "Pres" in tense:
            return categories.VERBppres
    elif pos in PRONTYPE_CATEGORIES:
        if "Yes" in morph.get("Poss"):
            return categories.DETposs if pos == "DET" else categories.PROposs
        for pron_type in morph.get("PronType"):
            if pron_type in PRONTYPE_CATEGORIES[pos]:
                return PRONTYPE_CATEGORIES[pos][pron_type]
    elif pos == "NUM":
        num_type = morph.get("NumType")
        if "Ord" in num_type:
            return categories.NUMord
        if "Card" in num_type:
            return categories.NUMcard
    return code


class SpacyTagger(Tagger):
    """
    Tags occurrences with a spaCy pipeline.  Since spaCy tokenizes
    differently than FrenchTokenizer, each occurrence takes its lemma and
    category from the first spaCy token that overlaps it; an occurrence
    with no overlapping spaCy token is left UNKNOWN.
    Pass nlp to reuse an already loaded pipeline (any callable returning
    a Doc); otherwise the model named by 'model', the SPACY_MODEL env vbl,
    or fr_core_news_sm, is loaded.
    """

    def __init__(self, model: Optional[str] = None, nlp=None):
        if nlp is None:
            import spacy
            if model is None:
                model = os.environ.get("SPACY_MODEL", "fr_core_news_sm")
            _logger.info("Spacy code version is %s", spacy.__version__)
            try:
                nlp = spacy.load(model)
            except OSError as e:
                raise GenericException(msg="Can't load spacy model '%s': %s" % (model, e))
            _logger.info("Spacy model version is %s", nlp.meta['version'])
        self.nlp = nlp

    def align_tokens(self, doc, occurrences: List[Occurrence]) -> Dict[int, object]:
        """Map occurrence indices to the first overlapping spaCy token.
        Both sequences are in text order, so one sweep suffices."""
        token_map = {}
        tokens = [t for t in doc if not t.is_space]
        ti = 0
        for oi, occ in enumerate(occurrences):
            while ti < len(tokens) and tokens[ti].idx + len(tokens[ti].text) <= occ.start:
                ti += 1
            if ti < len(tokens) and tokens[ti].idx < occ.end:
                token_map[oi] = tokens[ti]
        return token_map

    def tag(self, occurrences: Iterable[Occurrence], text: str) -> Iterator[Occurrence]:
        occurrences = list(occurrences)
        doc = self.nlp(text)
        token_map = self.align_tokens(doc, occurrences)
        if len(token_map) < len(occurrences):
            _logger.debug("%d of %d occurrences have no spacy token",
                          len(occurrences) - len(token_map), len(occurrences))
        for i, occ in enumerate(occurrences):
            token = token_map.get(i)
            if token is None:
                yield occ.with_tags(category=categories.UNKNOWN)
                continue
            yield occ.with_tags(lemma=token.lemma_.lower(),
                                category=category_for(token.pos_, token.morph))


def tagger_for_engine(engine: Optional[str], lexicon: Optional[Lexicon] = None,
                      model: Optional[str] = None) -> Optional[Tagger]:
    """Tagger named by a command line engine option: spacy, lexicon, or off."""
    if engine is None or engine == 'off':
        return None
    if engine == 'spacy':
        return SpacyTagger(model=model)
    if engine == 'lexicon':
        return LexiconTagger(lexicon)
    raise GenericException(msg="Unknown tagger engine '%s'" % engine)

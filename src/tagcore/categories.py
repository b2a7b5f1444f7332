"""
Morphosyntactic category codes for French.

A category code is an 8-bit value laid out as (major << 4) | minor.
The major nibble names a part-of-speech family, the minor nibble refines
it.  A code whose minor nibble is zero is the group marker for its family
(VERB, SUB, ...), so masking any code with 0xF0 yields its group.
Codes 0 (NULL, no information) and 1 (UNKNOWN, known to be unresolved)
are reserved and belong to no family.
"""

from typing import Dict, Iterator


NULL = 0
UNKNOWN = 1

# Verbs
VERB = 0x10
VERBaux = 0x11
VERBppass = 0x12
VERBppres = 0x13
VERBsup = 0x15
VERBloc = 0x1F

# Nouns
SUB = 0x20
SUBm = 0x21
SUBf = 0x22
SUBtit = 0x28
SUBloc = 0x2F

# Adjectives
ADJ = 0x30
ADJloc = 0x3F

# Adverbs
ADV = 0x40
ADVneg = 0x41
ADVplace = 0x42
ADVtemp = 0x43
ADVquant = 0x44
ADVindef = 0x4A
ADVinter = 0x4B
ADVloc = 0x4F

# Prepositions
PREP = 0x50
PREPloc = 0x5F

# Determiners
DET = 0x60
DETart = 0x61
DETprep = 0x62
DETnum = 0x63
DETindef = 0x6A
DETinter = 0x6B
DETdem = 0x6C
DETposs = 0x6D

# Pronouns
PRO = 0x70
PROpers = 0x71
PROrel = 0x72
PROindef = 0x7A
PROint = 0x7B
PROdem = 0x7C
PROposs = 0x7D

# Conjunctions
CONJ = 0x80
CONJcoord = 0x81
CONJsubord = 0x82

# Numbers
NUM = 0x90
NUMcard = 0x91
NUMord = 0x92
NUMunit = 0x93

# Proper names
NAME = 0xB0
NAMEpers = 0xB1
NAMEpersm = 0xB2
NAMEpersf = 0xB3
NAMEplace = 0xB4
NAMEorg = 0xB5
NAMEpeople = 0xB6
NAMEevent = 0xB7
NAMEauthor = 0xB8
NAMEfict = 0xB9
NAMEtitle = 0xBA
NAMEanimal = 0xBD
NAMEdemhum = 0xBE
NAMEgod = 0xBF

# Punctuation
PUN = 0xC0
PUNsent = 0xC1
PUNcl = 0xC2
PUNdiv = 0xC3

# Miscellaneous
MISC = 0xF0
ABBR = 0xF1
EXCL = 0xF2
MATH = 0xF4
REF = 0xF5
PARTdem = 0xFC
TEST = 0xFF


# Major nibbles, for the family predicates below.
VERB_MAJOR = VERB >> 4
SUB_MAJOR = SUB >> 4
ADJ_MAJOR = ADJ >> 4
ADV_MAJOR = ADV >> 4
PREP_MAJOR = PREP >> 4
DET_MAJOR = DET >> 4
PRO_MAJOR = PRO >> 4
CONJ_MAJOR = CONJ >> 4
NUM_MAJOR = NUM >> 4
NAME_MAJOR = NAME >> 4
PUN_MAJOR = PUN >> 4
MISC_MAJOR = MISC >> 4


CODES: Dict[str, int] = {
    "NULL": NULL,
    "UNKNOWN": UNKNOWN,
    "VERB": VERB,
    "VERBaux": VERBaux,
    "VERBppass": VERBppass,
    "VERBppres": VERBppres,
    "VERBsup": VERBsup,
    "VERBloc": VERBloc,
    "SUB": SUB,
    "SUBm": SUBm,
    "SUBf": SUBf,
    "SUBtit": SUBtit,
    "SUBloc": SUBloc,
    "ADJ": ADJ,
    "ADJloc": ADJloc,
    "ADV": ADV,
    "ADVneg": ADVneg,
    "ADVplace": ADVplace,
    "ADVtemp": ADVtemp,
    "ADVquant": ADVquant,
    "ADVindef": ADVindef,
    "ADVinter": ADVinter,
    "ADVloc": ADVloc,
    "PREP": PREP,
    "PREPloc": PREPloc,
    "DET": DET,
    "DETart": DETart,
    "DETprep": DETprep,
    "DETnum": DETnum,
    "DETindef": DETindef,
    "DETinter": DETinter,
    "DETdem": DETdem,
    "DETposs": DETposs,
    "PRO": PRO,
    "PROpers": PROpers,
    "PROrel": PROrel,
    "PROindef": PROindef,
    "PROint": PROint,
    "PROdem": PROdem,
    "PROposs": PROposs,
    "CONJ": CONJ,
    "CONJcoord": CONJcoord,
    "CONJsubord": CONJsubord,
    "NUM": NUM,
    "NUMcard": NUMcard,
    "NUMord": NUMord,
    "NUMunit": NUMunit,
    "NAME": NAME,
    "NAMEpers": NAMEpers,
    "NAMEpersm": NAMEpersm,
    "NAMEpersf": NAMEpersf,
    "NAMEplace": NAMEplace,
    "NAMEorg": NAMEorg,
    "NAMEpeople": NAMEpeople,
    "NAMEevent": NAMEevent,
    "NAMEauthor": NAMEauthor,
    "NAMEfict": NAMEfict,
    "NAMEtitle": NAMEtitle,
    "NAMEanimal": NAMEanimal,
    "NAMEdemhum": NAMEdemhum,
    "NAMEgod": NAMEgod,
    "PUN": PUN,
    "PUNsent": PUNsent,
    "PUNcl": PUNcl,
    "PUNdiv": PUNdiv,
    "MISC": MISC,
    "ABBR": ABBR,
    "EXCL": EXCL,
    "MATH": MATH,
    "REF": REF,
    "PARTdem": PARTdem,
    "TEST": TEST,
}

LABELS: Dict[int, str] = dict((c, name) for name, c in CODES.items())


def code(name: str) -> int:
    """Code for a category name; UNKNOWN for a name not in the table."""
    return CODES.get(name, UNKNOWN)


def label(c: int) -> str:
    """Name of a category code; "" for NULL, "UNKNOWN" for an undefined code."""
    c = c & 0xFF
    if c == NULL:
        return ""
    return LABELS.get(c, LABELS[UNKNOWN])


def is_known(name: str) -> bool:
    return name in CODES


def group_of(c: int) -> int:
    return c & 0xF0


def is_group_marker(c: int) -> bool:
    if c == NULL or c == UNKNOWN:
        return False
    return (c & 0x0F) == 0


def _major(c: int) -> int:
    # Reserved codes fall into major 0, which no family uses.
    return c >> 4


def _group_shift(c: int) -> int:
    # Values below 0x10 are major nibbles, anything else a code.
    if 0 <= c < 0x10:
        return c << 4
    return group_of(c & 0xFF)


def is_verb(c: int) -> bool:
    return _major(c) == VERB_MAJOR


def is_sub(c: int) -> bool:
    return _major(c) == SUB_MAJOR


def is_adj(c: int) -> bool:
    return _major(c) == ADJ_MAJOR


def is_adv(c: int) -> bool:
    return _major(c) == ADV_MAJOR


def is_prep(c: int) -> bool:
    return _major(c) == PREP_MAJOR


def is_det(c: int) -> bool:
    return _major(c) == DET_MAJOR


def is_pro(c: int) -> bool:
    return _major(c) == PRO_MAJOR


def is_conj(c: int) -> bool:
    return _major(c) == CONJ_MAJOR


def is_num(c: int) -> bool:
    # Numeral determiners ("trois chats") count as numbers too.
    return _major(c) == NUM_MAJOR or c == DETnum


def is_name(c: int) -> bool:
    return _major(c) == NAME_MAJOR


def is_pun(c: int) -> bool:
    return _major(c) == PUN_MAJOR


def is_misc(c: int) -> bool:
    return _major(c) == MISC_MAJOR


class CategoryFilter(object):
    """
    Set of accepted category codes, one bit per possible code.
    Mutators return the filter itself so that calls can be chained:
        CategoryFilter().set_group(VERB).clear(VERBaux)
    """

    SIZE = 256

    def __init__(self, *codes: int):
        self.bits = 0
        for c in codes:
            self.set(c)

    def set(self, c: int) -> 'CategoryFilter':
        self.bits |= 1 << (c & 0xFF)
        return self

    def clear(self, c: int) -> 'CategoryFilter':
        self.bits &= ~(1 << (c & 0xFF))
        return self

    def set_group(self, c: int) -> 'CategoryFilter':
        """Accept all 16 codes of a family.  c is either a major nibble
        (VERB_MAJOR) or any code of the family (VERB, VERBaux), which is
        masked to its group."""
        self.bits |= 0xFFFF << _group_shift(c)
        return self

    def clear_group(self, c: int) -> 'CategoryFilter':
        self.bits &= ~(0xFFFF << _group_shift(c))
        return self

    def set_all(self) -> 'CategoryFilter':
        self.bits = (1 << self.SIZE) - 1
        return self

    def clear_all(self) -> 'CategoryFilter':
        self.bits = 0
        return self

    def accept(self, c: int) -> bool:
        if c < 0 or c >= self.SIZE:
            return False
        return bool((self.bits >> c) & 1)

    def codes(self) -> Iterator[int]:
        for c in range(self.SIZE):
            if self.accept(c):
                yield c

    def __contains__(self, c):
        return self.accept(c)

    def __len__(self):
        return bin(self.bits).count("1")

    def __eq__(self, other):
        return isinstance(other, CategoryFilter) and self.bits == other.bits

    def __str__(self):
        lines = []
        for row in range(0, self.SIZE, 16):
            cells = ''.join('1' if self.accept(c) else '·' for c in range(row, row + 16))
            lines.append("%s\t%s" % (label(row), cells))
        return "\n".join(lines) + "\n"

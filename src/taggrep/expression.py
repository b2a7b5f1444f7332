import logging
import re
from typing import List, NamedTuple, Optional

from tagcore import categories
from tagcore.categories import CategoryFilter
from tagcore.dbfutil import GenericException, SimpleClass
from tagcore.lexicon import Lexicon

from .pattern import CompiledPattern, PatternNode
from .tokentest import (AnyTokenTest, CategoryGroupTokenTest, CategoryTokenTest, FilterTokenTest,
                        FormCategoryTokenTest, FormTokenTest, GapTokenTest, LemmaTokenTest, OrTest,
                        TokenTest)


_logger = logging.getLogger(f"{__name__}.<module>")

"""
Parses the pattern language into CompiledPatterns.

    altern -> concat (',' concat)*
    concat -> atom atom*
    atom   -> TERM | '(' altern ')'

A TERM is '*', '**' or '**N', a category name, a "quoted" literal, a
[bracketed] list of category names, a form/CATEGORY pair, a lemma known to
the lexicon, or else a form, possibly with '*' wildcards.
Parsing yields a small tree of PatternAtom, PatternConcat and PatternAltern,
which is then laid out into the node array of a CompiledPattern.
"""


class CompileError(GenericException):
    """A pattern that can't be compiled.  Carries the offending construct
    and its character offset in the pattern text."""

    description = "Malformed pattern"

    def __init__(self, expr: str, position: int, construct: str, description: Optional[str] = None):
        if description is not None:
            self.description = description
        self.expr = expr
        self.position = position
        self.construct = construct
        super().__init__(msg="%s: '%s' at position %d in pattern '%s'"
                             % (self.description, construct, position, expr))


class UnbalancedParentheses(CompileError):
    description = "Unbalanced parentheses"


class UnterminatedQuote(CompileError):
    description = "Unterminated quote"


class DanglingAlternation(CompileError):
    description = "Comma with no alternative to attach to"


class UnknownGlobSyntax(CompileError):
    description = "Unsupported wildcard (only '*' is allowed)"


class EmptyPattern(CompileError):
    description = "Empty pattern"


class MisplacedGap(CompileError):
    description = "Gap must follow a test"


class UnknownCategory(CompileError):
    description = "Unknown category"


class PatternToken(NamedTuple):
    text: str
    position: int


class PatternRegex(SimpleClass):
    """Parse tree of a pattern."""

    def lay(self, nodes: List[PatternNode], follow: Optional[int]) -> int:
        """Append nodes for this construct, all continuing to 'follow',
        and return the index of the head node."""
        raise NotImplementedError()


class PatternAtom(PatternRegex):
    test: TokenTest
    position: int

    def lay(self, nodes, follow):
        nodes.append(PatternNode(self.test, follow, (), self.position))
        return len(nodes) - 1

    def __str__(self):
        return self.test.label()


class PatternConcat(PatternRegex):
    subs: List[PatternRegex]

    def lay(self, nodes, follow):
        head = follow
        for sub in reversed(self.subs):
            head = sub.lay(nodes, head)
        return head

    def __str__(self):
        return " ".join(str(x) for x in self.subs)


class PatternAltern(PatternRegex):
    subs: List[PatternRegex]  # at least 2
    position: int

    def lay(self, nodes, follow):
        children = tuple(sub.lay(nodes, follow) for sub in self.subs)
        test = OrTest(nodes[c].test for c in children)
        nodes.append(PatternNode(test, follow, children, self.position))
        return len(nodes) - 1

    def __str__(self):
        return "(" + ", ".join(str(x) for x in self.subs) + ")"


def _renumber(nodes: List[PatternNode], root: int) -> List[PatternNode]:
    """Reorder nodes so that the root comes first and each chain reads
    left to right."""
    order = []
    seen = set()

    def visit(i, stop=None):
        while i is not None and i != stop and i not in seen:
            seen.add(i)
            order.append(i)
            for child in nodes[i].children:
                visit(child, nodes[i].next)
            i = nodes[i].next

    visit(root)
    index = dict((old, new) for new, old in enumerate(order))
    return [nodes[old]._replace(next=None if nodes[old].next is None else index[nodes[old].next],
                                children=tuple(index[c] for c in nodes[old].children))
            for old in order]


GAP_RE = re.compile(r'\*\*(\d+)?$')
BAD_GLOB_CHARS = re.compile(r'[?\[\]{}]')


class PatternExpression(SimpleClass):
    """
    Compiles one textual pattern.  A lexicon, if given, lets bare words
    that are lemmas compile to lemma tests.
    """
    expr: str
    lexicon: Optional[Lexicon]
    token_expression: str
    toks: List[PatternToken]

    def __init__(self, expr: str, lexicon: Optional[Lexicon] = None, **kwargs):
        super().__init__(**kwargs)
        self.expr = expr
        self.lexicon = lexicon
        self._default('token_expression', r'"[^"]*"?|\[[^\]]*\]?|[(),]|[^\s(),"]+')

    def tokenize(self, expr) -> List[PatternToken]:
        return [PatternToken(m.group(0), m.start())
                for m in re.finditer(self.token_expression, expr)]

    def error(self, cls, tok: PatternToken, description=None):
        return cls(self.expr, tok.position, tok.text, description)

    def parse(self) -> PatternRegex:
        self.toks = self.tokenize(self.expr)
        if len(self.toks) == 0:
            raise EmptyPattern(self.expr, 0, self.expr)
        regex = self.altern()
        if len(self.toks) > 0:
            # altern stops only at ')' or the end
            raise self.error(UnbalancedParentheses, self.toks[0])
        return regex

    def compile(self) -> CompiledPattern:
        regex = self.parse()
        _logger.debug("Parsed '%s' as %s", self.expr, regex)
        nodes: List[PatternNode] = []
        root = regex.lay(nodes, None)
        nodes = _renumber(nodes, root)
        self.validate(nodes)
        pattern = CompiledPattern(nodes, self.expr)
        _logger.debug("Compiled '%s' into %d nodes", self.expr, len(nodes))
        return pattern

    def validate(self, nodes: List[PatternNode]) -> None:
        """A gap needs a test before it: it can't head the pattern or an
        alternative, and can't follow another gap."""
        heads = [CompiledPattern.ROOT]
        for node in nodes:
            heads.extend(node.children)
        for i in heads:
            if nodes[i].is_gap():
                raise MisplacedGap(self.expr, nodes[i].position, nodes[i].test.label())
        for node in nodes:
            if node.is_gap() and node.next is not None and nodes[node.next].is_gap():
                succ = nodes[node.next]
                raise MisplacedGap(self.expr, succ.position, succ.test.label(),
                                   "Gap can't follow another gap")

    # altern -> concat (',' concat)*
    def altern(self, opener: Optional[PatternToken] = None) -> PatternRegex:
        subs: List[PatternRegex] = []
        comma = None
        while True:
            if len(self.toks) == 0 or self.toks[0].text in (',', ')'):
                if comma is not None:
                    raise self.error(DanglingAlternation, comma)
                if len(self.toks) > 0 and self.toks[0].text == ',':
                    raise self.error(DanglingAlternation, self.toks[0])
                if opener is not None:
                    if len(self.toks) == 0:
                        raise self.error(UnbalancedParentheses, opener)
                    raise self.error(EmptyPattern, opener, "Empty group")
                if len(self.toks) > 0:
                    raise self.error(UnbalancedParentheses, self.toks[0])
                raise EmptyPattern(self.expr, len(self.expr), self.expr)
            sub = self.concat()
            # (a, b), c is the same position as a, b, c
            if isinstance(sub, PatternConcat) and len(sub.subs) == 1 and isinstance(sub.subs[0], PatternAltern):
                subs.extend(sub.subs[0].subs)
            else:
                subs.append(sub)
            if len(self.toks) > 0 and self.toks[0].text == ',':
                comma = self.toks.pop(0)
                continue
            break
        if len(subs) == 1:
            return subs[0]
        position = opener.position if opener is not None else 0
        return PatternAltern(subs=subs, position=position)

    # concat -> atom atom*
    def concat(self) -> PatternRegex:
        concat = []
        while len(self.toks) > 0 and self.toks[0].text not in (',', ')'):
            concat.append(self.atom())
        return PatternConcat(subs=concat)

    # atom -> TERM | '(' altern ')'
    def atom(self) -> PatternRegex:
        tok = self.toks.pop(0)
        if tok.text == '(':
            regex = self.altern(opener=tok)  # recurse
            if len(self.toks) == 0 or self.toks[0].text != ')':
                raise self.error(UnbalancedParentheses, tok)
            self.toks.pop(0)
            return regex
        return PatternAtom(test=self.term(tok), position=tok.position)

    def term(self, tok: PatternToken) -> TokenTest:
        text = tok.text

        if text.startswith('"'):
            if len(text) < 2 or not text.endswith('"'):
                raise self.error(UnterminatedQuote, tok)
            literal = text[1:-1]
            if literal == "":
                raise self.error(EmptyPattern, tok, "Empty quoted term")
            if categories.is_known(literal):
                return CategoryTokenTest(categories.code(literal), quoted=True)
            return FormTokenTest(literal, quoted=True)

        if text.startswith('['):
            if not text.endswith(']'):
                raise self.error(UnbalancedParentheses, tok, "Unterminated category list")
            return self.category_list(tok)

        if text == '*':
            return AnyTokenTest()
        m = GAP_RE.match(text)
        if m:
            if m.group(1) is None:
                return GapTokenTest()
            return GapTokenTest(budget=int(m.group(1)))
        if re.match(r'\*\*\*', text):
            raise self.error(UnknownGlobSyntax, tok)

        if BAD_GLOB_CHARS.search(text):
            raise self.error(UnknownGlobSyntax, tok)

        if '/' in text.strip('/'):
            form, name = text.rsplit('/', 1)
            return FormCategoryTokenTest(FormTokenTest(form), self.category_test(tok, name))

        if categories.is_known(text):
            return self.category_test(tok, text)

        if self.lexicon is not None and '*' not in text and self.lexicon.lemma(text) == text:
            return LemmaTokenTest(text)

        return FormTokenTest(text)

    def category_test(self, tok: PatternToken, name: str) -> TokenTest:
        if not categories.is_known(name):
            raise UnknownCategory(self.expr, tok.position, name)
        code = categories.code(name)
        if categories.is_group_marker(code):
            return CategoryGroupTokenTest(code)
        return CategoryTokenTest(code)

    def category_list(self, tok: PatternToken) -> FilterTokenTest:
        names = tok.text[1:-1].split()
        if len(names) == 0:
            raise self.error(EmptyPattern, tok, "Empty category list")
        cfilter = CategoryFilter()
        for name in names:
            if not categories.is_known(name):
                raise UnknownCategory(self.expr, tok.position, name)
            code = categories.code(name)
            if categories.is_group_marker(code):
                cfilter.set_group(code)
            else:
                cfilter.set(code)
        return FilterTokenTest(cfilter, names)


def compile_pattern(expr: str, lexicon: Optional[Lexicon] = None) -> CompiledPattern:
    return PatternExpression(expr, lexicon).compile()

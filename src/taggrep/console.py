import logging
import sys

from tagcore.dbfutil import GenericException, file_contents
from tagcore.tagger import tagger_for_engine

from .manager import GrepManager


_logger = logging.getLogger(f"{__name__}.<module>")

# Name under which a pattern given on the command line is registered.
COMMAND_LINE_PATTERN = "pattern"


def main(pattern: ("Pattern to search for, or a pattern name with -p", "positional", None, str),
         target: ("File containing text to search", "positional", None, str),
         count: ("Action: Only print the number of matches", "flag", "c"),
         dump: ("Action: Print the compiled pattern", "flag", "d"),
         as_json: ("Action: Print matches as JSON lines", "flag", "j"),
         pattern_file: ("Option: File of 'name -> pattern' statements", "option", "p", str) = None,
         nlp_engine: ("Option: Tagger to use {spacy, lexicon, off}", "option", "x", str) = 'spacy',
         model: ("Option: Name of the spacy model", "option", "m", str) = None,
         start: ("Option: Character offset to start scanning at", "option", "s", int) = 0,
         end: ("Option: Character offset to stop scanning at", "option", "e", int) = None,
         ):

    try:
        grm = GrepManager(tagger=tagger_for_engine(nlp_engine, model=model))
        if pattern_file is not None:
            grm.parse_file(pattern_file)
            patname = pattern
        else:
            grm.add_pattern(COMMAND_LINE_PATTERN, pattern)
            patname = COMMAND_LINE_PATTERN
        compiled = grm.lookup(patname)
    except GenericException as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if dump:
        print(compiled.label())
        compiled.dump()
        return

    text = file_contents(target)
    _logger.info("Scanning %s (%d characters) for %s", target, len(text), compiled.label())

    matches = grm.scan(patname, text, start, end)
    if count:
        print(sum(1 for _ in matches))
        return
    for m in matches:
        if as_json:
            print(m.as_json())
        else:
            print("%d-%d\t%s" % (m.start_offset(), m.end_offset(), m.matching_text()))

"""
Modules:
categories - morphosyntactic category codes, family predicates, CategoryFilter
dbfutil    - SimpleClass configuration base, GenericException, file helpers
lexicon    - read-only lookup of forms and locutions with lemma and category
logging    - logging.config presets for scripts
occurrence - the Occurrence record produced by tokenizers and taggers
tagger     - lexicon and spacy taggers filling in lemma and category
tokenizer  - lazy French tokenizer
"""

"""
Modules:
console    - command line front end
expression - parses the pattern language into compiled patterns
manager    - holds named compiled patterns, tokenizes, tags and scans texts
match      - objects representing matches of patterns against occurrence streams
matcher    - streaming matcher driving one compiled pattern over an occurrence stream
pattern    - compiled patterns: immutable arrays of pattern nodes
tokentest  - tests applied to a single occurrence
"""

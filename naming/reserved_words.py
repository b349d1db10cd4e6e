"""
reserved_words.py
Rust keywords that cannot be used as plain identifiers in generated trait code.
"""

RUST_KEYWORDS = frozenset({
    'type', 'match', 'ref', 'mut', 'const', 'fn', 'mod', 'pub', 'self', 'super', 'as', 'trait',
    'struct', 'enum', 'impl', 'use', 'where', 'loop', 'move', 'static', 'async', 'await', 'dyn',
    'crate', 'abstract', 'final', 'macro', 'try', 'union', 'box', 'continue', 'else', 'extern',
    'false', 'for', 'if', 'in', 'let', 'return', 'true', 'unsafe', 'while',
    'break', 'do', 'gen', 'override', 'priv', 'typeof', 'unsized', 'virtual', 'yield',
})

KEYWORD_SUFFIX = "_"


def escape_keyword(ident: str) -> str:
    if ident in RUST_KEYWORDS:
        return ident + KEYWORD_SUFFIX
    return ident

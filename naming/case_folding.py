"""Name conversion utilities: D-Bus member names to Rust snake_case."""
import re

# An uppercase run followed by a capitalised word: "XMLHttp" -> "XML", "Http"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# A lowercase letter or digit followed by a capital: "loadHTML" -> "load", "HTML"
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# Anything that is not a letter or digit, Unicode letters included
_SEPARATORS = re.compile(r"[\W_]+")


def fold_case(name: str) -> str:
    """Convert CamelCase, mixedCase, kebab-case or snake_case names to lowercase snake_case."""
    words = []
    for chunk in _SEPARATORS.split(name):
        if not chunk:
            continue
        chunk = _ACRONYM_BOUNDARY.sub(r"\1_\2", chunk)
        chunk = _WORD_BOUNDARY.sub(r"\1_\2", chunk)
        words.extend(chunk.split("_"))
    return "_".join(w.lower() for w in words if w)

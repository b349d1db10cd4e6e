"""
identifier_synthesizer.py
Turns raw D-Bus names into unique, keyword-safe Rust identifiers.

Every name goes through the same steps: placeholder for missing names, snake_case folding,
keyword escaping, then collision resolution against a NamingScope. How a collision is resolved
depends on the role of the name:

- methods, arguments and signals get a numeric suffix: name, name_2, name_3, ...
- property accessors first try a `_prop` suffix, then `_prop2`, `_prop3`, ...

The scope is updated with the returned name.
"""
from enum import Enum

from naming.case_folding import fold_case
from naming.naming_scope import NamingScope
from naming.reserved_words import escape_keyword

PLACEHOLDER_NAME = "arg"
ATTRIBUTE_SUFFIX = "_prop"


class IdentifierRole(Enum):
    OPERATION = "operation"
    ATTRIBUTE = "attribute"
    ARGUMENT = "argument"
    NOTIFICATION = "notification"


class Identifier:
    """
    A synthesized name. `base` is the folded and keyword-escaped form before any collision suffix;
    when `name` differs from it the generated code has to keep an explicit binding to the D-Bus name.
    """
    def __init__(self, name: str, base: str, raw_name: str):
        self.name = name
        self.base = base
        self.raw_name = raw_name

    @property
    def diverges(self) -> bool:
        return self.name != self.base

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Identifier(name={self.name!r}, base={self.base!r}, raw_name={self.raw_name!r})"


def base_identifier(raw_name, prefix: str = "") -> str:
    folded = fold_case(raw_name) if raw_name else ""
    if not folded:
        folded = PLACEHOLDER_NAME
    elif folded[0].isdigit():
        folded = "_" + folded
    return escape_keyword(prefix + folded)


def _numeric_candidates(stem: str, first: int = 2, sep: str = "_"):
    idx = first
    while True:
        yield f"{stem}{sep}{idx}"
        idx += 1


def synthesize(raw_name, role: IdentifierRole, scope: NamingScope, prefix: str = "") -> Identifier:
    """
    Synthesize a scope-unique identifier for `raw_name` (which may be None) and commit it to `scope`.
    `prefix` is prepended before keyword escaping, e.g. "get_" / "set_" for property accessors.
    """
    base = base_identifier(raw_name, prefix)
    name = base
    if name in scope:
        if role == IdentifierRole.ATTRIBUTE:
            name = base + ATTRIBUTE_SUFFIX
            if name in scope:
                name = next(c for c in _numeric_candidates(name, sep="") if c not in scope)
        else:
            name = next(c for c in _numeric_candidates(base) if c not in scope)
    scope.add(name)
    return Identifier(name, base, raw_name if raw_name is not None else PLACEHOLDER_NAME)

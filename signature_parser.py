"""
signature_parser.py
Parses a single D-Bus type signature (e.g. "a{sv}", "a(sssa{ss}q)") into a TypeExpression tree.

Unknown type codes, and signatures that end where a type is expected, are recoverable: they become
Unknown() and a diagnostic is appended to the caller's warnings list. Structural errors (unterminated
dict entries or structs, stray closing brackets, trailing characters) raise MalformedSignatureError.
"""
from typing import List, Optional

from lark import Lark, Transformer_NonRecursive
from lark.exceptions import UnexpectedInput

from signature_types import PRIMITIVE_CODES, Mapping, Primitive, Sequence, Tuple_, TypeExpression, Unknown

# D-Bus caps signatures at 255 bytes, which also bounds nesting depth
MAX_SIGNATURE_LENGTH = 255


class MalformedSignatureError(ValueError):
    pass


grammar = r"""
    start: type?

    ?type: primitive
         | unknown
         | mapping
         | sequence
         | dangling_sequence
         | tuple

    primitive: PRIMITIVE
    unknown: UNKNOWN_CODE
    mapping: "a" "{" type type "}"
    sequence: "a" type
    dangling_sequence: DANGLING_ARRAY
    tuple: "(" type* ")"

    PRIMITIVE: /[ybnqiuxtdsogv]/
    // an array code with nothing left to be its element
    DANGLING_ARRAY.2: /a(?=[)}]|\Z)/
    UNKNOWN_CODE: /[^ybnqiuxtdsogva(){}]/
"""

parser = Lark(
    grammar,
    start='start',
    parser='lalr'
)


class SignatureToTypeTree(Transformer_NonRecursive):
    """Turns the lark parse tree into TypeExpression nodes, recording recoverable problems."""

    def __init__(self, signature: str, warnings: List[str]):
        super().__init__()
        self.signature = signature
        self.warnings = warnings

    def start(self, children):
        if not children:
            self.warnings.append(f"Warning: empty D-Bus signature '{self.signature}', using a variant")
            return Unknown()
        return children[0]

    def primitive(self, children):
        return Primitive(PRIMITIVE_CODES[str(children[0])])

    def unknown(self, children):
        token = children[0]
        self.warnings.append(
            f"Warning: unknown D-Bus type '{token}' at column {token.column} of signature '{self.signature}'"
        )
        return Unknown()

    def mapping(self, children):
        key, value = children
        return Mapping(key, value)

    def sequence(self, children):
        return Sequence(children[0])

    def dangling_sequence(self, children):
        token = children[0]
        self.warnings.append(
            f"Warning: D-Bus signature '{self.signature}' ends after the array code at column {token.column}, "
            f"using a variant element"
        )
        return Sequence(Unknown())

    def tuple(self, children):
        return Tuple_(children)


def parse_signature(signature: str, warnings: Optional[List[str]] = None) -> TypeExpression:
    """
    Parse one complete D-Bus type. Diagnostics for unknown codes are appended to `warnings` when given.
    Raises MalformedSignatureError when the signature is structurally invalid.
    """
    if warnings is None:
        warnings = []
    if len(signature) > MAX_SIGNATURE_LENGTH:
        raise MalformedSignatureError(
            f"D-Bus signature is {len(signature)} characters long, the limit is {MAX_SIGNATURE_LENGTH}"
        )
    try:
        tree = parser.parse(signature)
    except UnexpectedInput as exc:
        column = getattr(exc, 'column', None)
        where = f"column {column}" if column and column > 0 else "end of input"
        raise MalformedSignatureError(f"Malformed D-Bus signature '{signature}' at {where}") from exc
    return SignatureToTypeTree(signature, warnings).transform(tree)

"""
Literal Parser - Extracted from GoogModuleTransformer
Handles string and numeric literal tokens
"""

import re
from ...shared import StringLiteral, NumericLiteral, SourceLocation

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")


def _decode_escape(match: "re.Match") -> str:
    body = match.group(1)
    if body.startswith("u{"):
        return chr(int(body[2:-1], 16))
    if body[0] in "ux" and len(body) > 1:
        return chr(int(body[1:], 16))
    if body in ("\n", "\r", "\r\n", "\u2028", "\u2029"):
        # Line continuation
        return ""
    return _SIMPLE_ESCAPES.get(body, body)


class LiteralParser:
    """Dedicated parser for literal tokens"""

    @staticmethod
    def parse_string(token: str, location: SourceLocation) -> StringLiteral:
        """Quoted token text -> StringLiteral (value decoded, quote style and raw text kept)"""
        text = str(token)
        quote = text[0]
        literal = StringLiteral(
            LiteralParser.unescape(text[1:-1]),
            single_quote=(quote == "'"),
            location=location,
        )
        literal.raw = text
        return literal

    @staticmethod
    def parse_number(token: str, location: SourceLocation) -> NumericLiteral:
        return NumericLiteral(str(token), location=location)

    @staticmethod
    def unescape(body: str) -> str:
        if "\\" not in body:
            return body
        return _ESCAPE_RE.sub(_decode_escape, body)

from __future__ import annotations
import re
from typing import Iterator

from .tokens import Token, TokenKind, KEYWORDS

# El orden importa: '\n' antes que el espacio en blanco, comentarios antes que '/'.
TOKEN_RE = re.compile(r"""
    (?P<nl>\n)
  | (?P<ws>[ \t\r\f\v]+)
  | (?P<comment>(?:\#|//)[^\n]*)
  | (?P<num>[0-9][A-Za-z0-9_]*)
  | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<comma>,)
  | (?P<error>.)
""", re.VERBOSE)

class Lexer:
    """Convierte el texto fuente en una secuencia perezosa de tokens.

    - Comentarios: '#' o '//' hasta fin de línea (el salto de línea sí se emite).
    - Números: cualquier racha alfanumérica que empiece por dígito ('10x', '0x1G'
      incluidos); el parser decide si el literal es válido.
    - Palabras: palabra clave si coincide (sin distinguir mayúsculas), si no IDENT.
    - Nunca falla: un carácter desconocido produce un token ERROR.

    Cada llamada a ``tokens()`` (o ``iter(lexer)``) recorre el texto desde el principio.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def tokens(self) -> Iterator[Token]:
        text = self.text
        line = 1
        line_start = 0
        pos = 0
        while pos < len(text):
            m = TOKEN_RE.match(text, pos)
            group = m.lastgroup
            lexeme = m.group()
            col = pos - line_start + 1
            pos = m.end()
            if group == "nl":
                yield Token(TokenKind.NL, lexeme, line, col)
                line += 1
                line_start = pos
            elif group in ("ws", "comment"):
                continue
            elif group == "num":
                yield Token(TokenKind.NUM, lexeme, line, col)
            elif group == "word":
                yield Token(KEYWORDS.get(lexeme.lower(), TokenKind.IDENT), lexeme, line, col)
            elif group == "comma":
                yield Token(TokenKind.COMMA, lexeme, line, col)
            else:
                yield Token(TokenKind.ERROR, lexeme, line, col)
        yield Token(TokenKind.EOF, "", line, pos - line_start + 1)

def tokenize(text: str) -> list[Token]:
    """Lista completa de tokens, terminada en EOF."""
    return list(Lexer(text))

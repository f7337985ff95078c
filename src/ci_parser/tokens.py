'''
tipos de token, Token inmutable y tabla de palabras clave
'''

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Dict

class TokenKind(enum.Enum):
    # Palabras clave (una por instrucción)
    ADD = "add"
    SUB = "sub"
    MOV = "mov"
    CMP = "cmp"
    CMP_U = "cmp_u"
    PRINT = "print"

    IDENT = "IDENT"     # identificadores, incluye 'xN' y las bases d/x/b/s
    NUM = "NUM"         # empieza por dígito; la validación la hace el parser
    COMMA = ","
    NL = "NL"           # cada salto de línea físico
    ERROR = "ERROR"     # carácter no reconocido
    EOF = "EOF"

KEYWORDS: Dict[str, TokenKind] = {
    "add": TokenKind.ADD,
    "sub": TokenKind.SUB,
    "mov": TokenKind.MOV,
    "cmp": TokenKind.CMP,
    "cmp_u": TokenKind.CMP_U,
    "print": TokenKind.PRINT,
}

@dataclass(frozen=True)
class Token:
    """Token con su texto literal y posición (línea/columna desde 1)."""
    kind: TokenKind
    text: str
    line: int
    col: int

    @property
    def length(self) -> int:
        return len(self.text)

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r}, L{self.line}:{self.col})"

'''
tabla de gramática por instrucción (destino y huecos de operandos)
'''

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Dict, Tuple

from .ast import CommandKind
from .tokens import TokenKind

class Slot(enum.Enum):
    REG = "reg"             # solo registro
    REG_OR_IMM = "val"      # registro o inmediato
    BASE = "base"           # d/x/b/s (PRINT)

@dataclass(frozen=True)
class CSpec:
    """Forma de una instrucción.

    - kind: CommandKind que se construye
    - destination: True si el primer operando es un registro destino
    - operands: huecos de operand_a y operand_b, en orden
    """
    kind: CommandKind
    destination: bool
    operands: Tuple[Slot, ...]

SPEC: Dict[TokenKind, CSpec] = {}

def _add(keyword: TokenKind, kind: CommandKind, destination: bool, *operands: Slot):
    SPEC[keyword] = CSpec(kind, destination, operands)

_V = Slot.REG_OR_IMM

_add(TokenKind.ADD,   CommandKind.ADD,   True,  _V, _V)
_add(TokenKind.SUB,   CommandKind.SUB,   True,  _V, _V)
_add(TokenKind.MOV,   CommandKind.MOV,   True,  _V)
_add(TokenKind.CMP,   CommandKind.CMP,   False, _V, _V)
_add(TokenKind.CMP_U, CommandKind.CMP_U, False, _V, _V)
_add(TokenKind.PRINT, CommandKind.PRINT, False, Slot.BASE, _V)

def spec(keyword: TokenKind) -> CSpec:
    """Devuelve la forma de la instrucción para un token de palabra clave."""
    if keyword not in SPEC:
        raise KeyError(f"Instrucción desconocida: {keyword.value}")
    return SPEC[keyword]

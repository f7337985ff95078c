'''
dataclases del IR (Command, CommandKind, operandos Reg/Imm/Base)
'''

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Dict, Optional, Union

# ---- Tipos de comando ----

class CommandKind(enum.Enum):
    ADD = "add"
    SUB = "sub"
    MOV = "mov"
    CMP = "cmp"
    CMP_U = "cmp_u"
    PRINT = "print"
    BRANCH = "b"        # lo construye el sistema que resuelve etiquetas

class BranchCondition(enum.Enum):
    NONE = "none"
    ALWAYS = "al"
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

# Tabla de símbolos externa: nombre de etiqueta -> posición en el programa.
LabelMap = Dict[str, int]

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Referencia a registro 'xN' con su índice 0..31."""
    num: int

    @property
    def name(self) -> str:
        return f"x{self.num}"

@dataclass(frozen=True)
class Imm:
    """Inmediato numérico (cabe en 64 bits sin signo)."""
    value: int

@dataclass(frozen=True)
class Base:
    """Base de impresión de PRINT: 'd', 'x', 'b' o 's'."""
    char: str

Operand = Union[Reg, Imm, Base]

# ---- Nodo del IR ----

@dataclass(frozen=True)
class Command:
    """Instrucción ya validada.

    Los huecos que el tipo no usa quedan en None. PRINT guarda la base en
    operand_a y el valor a imprimir en operand_b; CMP/CMP_U no tienen destino;
    MOV solo usa operand_a.
    """
    kind: CommandKind
    destination: Optional[Reg] = None
    operand_a: Optional[Operand] = None
    operand_b: Optional[Operand] = None
    branch_condition: BranchCondition = BranchCondition.NONE
    line: int = 0
    col: int = 0

    @property
    def is_a_immediate(self) -> bool:
        return isinstance(self.operand_a, Imm)

    @property
    def is_b_immediate(self) -> bool:
        return isinstance(self.operand_b, Imm)

    @property
    def is_a_string(self) -> bool:
        return isinstance(self.operand_a, Base)

'''
validación de registros 'xN' (0..31)
'''

from __future__ import annotations
import re

NUM_REGS = 32
_DIGITS_RE = re.compile(r"^[0-9]+$")

def is_register_candidate(text: str) -> bool:
    """Empieza por 'x' y tiene al menos un carácter más (no garantiza validez)."""
    return len(text) >= 2 and text[0] == "x"

def parse_register(text: str) -> int:
    """Devuelve el índice 0..31 del registro 'xN' o lanza ValueError."""
    if not is_register_candidate(text):
        raise ValueError(f"Registro inválido: {text}")
    rest = text[1:]
    if not _DIGITS_RE.match(rest):
        raise ValueError(f"Registro inválido: {text} (se esperaba x seguido de un número)")
    n = int(rest, 10)
    if not 0 <= n < NUM_REGS:
        raise ValueError(f"Registro fuera de rango: {text} (x0..x{NUM_REGS - 1})")
    return n

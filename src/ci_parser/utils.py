'''
literales numéricos (dec/hex/bin) y bases de impresión
'''

from __future__ import annotations

# Máscara para 64 bits sin signo
U64_MASK = 0xFFFFFFFFFFFFFFFF

BASE_CHARS = frozenset("dxbs")

_HEX_DIGITS = "0123456789abcdef"

def literal_base(text: str) -> tuple[int, str]:
    """Detecta la base por prefijo: '0x' -> 16, '0b' -> 2, resto -> 10.
    Devuelve (base, dígitos sin prefijo)."""
    if len(text) >= 2 and text[0] == "0":
        if text[1] in "xX":
            return 16, text[2:]
        if text[1] in "bB":
            return 2, text[2:]
    return 10, text

def parse_int_literal(text: str) -> int:
    """Convierte el literal completo o lanza ValueError.

    Cada dígito se valida a mano según la base: no se aceptan restos
    ('10x'), dígitos fuera de base ('0x1G', '0b102') ni prefijos vacíos ('0x').
    """
    base, digits = literal_base(text)
    if not digits:
        raise ValueError(f"Literal numérico sin dígitos: {text}")
    value = 0
    for ch in digits:
        d = _HEX_DIGITS.find(ch.lower())
        if d < 0 or d >= base:
            raise ValueError(f"Dígito '{ch}' inválido en base {base}: {text}")
        value = value * base + d
    if value > U64_MASK:
        raise ValueError(f"Literal fuera de rango (64 bits): {text}")
    return value

def is_base(text: str) -> bool:
    """Una sola letra entre d (decimal), x (hex), b (binario) y s (cadena)."""
    return len(text) == 1 and text in BASE_CHARS

'''
clase Diagnostic y helpers (línea/columna, token culpable, tipos de error)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

from .tokens import Token, TokenKind

# Severidad de los diagnósticos (en español)
Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

EOF_MARKER = "<EOF>"

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Todos los diagnósticos del parser son errores, con ubicación opcional (archivo, línea y columna),
    los datos del token que lo provocó (texto, tipo y longitud) y un mensaje de ayuda
    (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    token_text: Optional[str] = None
    token_kind: Optional[TokenKind] = None
    token_length: Optional[int] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.token_kind is not None:
            core += f" [token {self.token_text!r}, tipo {self.token_kind.name}, longitud {self.token_length}]"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

def token_error(message: str, token: Token, *, file: str | None = None,
                hint: str | None = None) -> Diagnostic:
    """Error situado en un token; EOF se muestra como '<EOF>'."""
    text = EOF_MARKER if token.kind is TokenKind.EOF else token.text
    return Diagnostic("error", message, token.line, token.col, hint, file,
                      token_text=text, token_kind=token.kind, token_length=token.length)

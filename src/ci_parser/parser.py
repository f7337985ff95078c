# src/ci_parser/parser.py
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from .lexer import Lexer
from .tokens import Token, TokenKind
from .ast import Command, LabelMap, Reg, Imm, Base, Operand
from .isa import spec, CSpec, Slot
from .regs import is_register_candidate, parse_register
from .utils import parse_int_literal, is_base
from .diagnostics import Diagnostic, token_error
from .writers import to_listing_lines

log = logging.getLogger(__name__)

_SLOT_NAMES = ("primer", "segundo")

class ParseFailure(Exception):
    """Aborta la instrucción en curso; nunca sale de Parser."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint

class Parser:
    """Parser descendente con dos tokens en búfer (current y next).

    Cada instrucción se analiza con una producción genérica guiada por la tabla
    de isa.SPEC (vía isa.spec). Un fallo genera un único diagnóstico, activa ``had_error`` y
    descarta la instrucción; ``parse_commands`` salta al final de la línea y sigue.
    """

    def __init__(self, lexer: Lexer, label_map: Optional[LabelMap] = None, *,
                 filename: Optional[str] = None):
        self.label_map = label_map      # se conserva para ramas/etiquetas (sin uso aquí)
        self.filename = filename
        self.had_error = False
        self.diagnostics: List[Diagnostic] = []
        self._stream = lexer.tokens()
        self._last: Optional[Token] = None
        self.current: Token = self._pull()
        self.next: Token = self._pull()

    # ---- Búfer de tokens ----

    def _pull(self) -> Token:
        tok = next(self._stream, None)
        if tok is None:
            # Agotado: se repite el EOF ya visto.
            return self._last
        self._last = tok
        return tok

    def is_at_end(self) -> bool:
        return self.current.kind is TokenKind.EOF

    def advance(self) -> Token:
        """Devuelve current y desplaza el búfer; en EOF no se mueve."""
        tok = self.current
        if not self.is_at_end():
            self.current = self.next
            self.next = self._pull()
        return tok

    def consume(self, kind: TokenKind) -> bool:
        if self.current.kind is kind:
            self.advance()
            return True
        return False

    def skip_blank_lines(self) -> None:
        while self.consume(TokenKind.NL):
            pass

    def consume_line_terminator(self) -> bool:
        """Un salto de línea, o EOF como terminador implícito (no se consume)."""
        return self.consume(TokenKind.NL) or self.is_at_end()

    def skip_to_next_line(self) -> None:
        while self.current.kind not in (TokenKind.NL, TokenKind.EOF):
            self.advance()
        self.consume(TokenKind.NL)

    # ---- Diagnósticos ----

    def report(self, message: str, hint: Optional[str] = None) -> None:
        d = token_error(message, self.current, file=self.filename, hint=hint)
        self.diagnostics.append(d)
        self.had_error = True
        log.debug("diagnóstico: %s", d)

    # ---- Operandos ----

    def parse_register_operand(self) -> Reg:
        tok = self.current
        if tok.kind is not TokenKind.IDENT or not is_register_candidate(tok.text):
            raise ParseFailure("se esperaba un registro")
        try:
            num = parse_register(tok.text)
        except ValueError as ex:
            raise ParseFailure("registro inválido", hint=str(ex)) from ex
        self.advance()
        return Reg(num)

    def parse_immediate(self) -> Imm:
        try:
            value = parse_int_literal(self.current.text)
        except ValueError as ex:
            raise ParseFailure("literal numérico inválido", hint=str(ex)) from ex
        self.advance()
        return Imm(value)

    def parse_register_or_immediate(self) -> Operand:
        """Registro 'xN' o inmediato; si falla no consume el token."""
        kind = self.current.kind
        if kind is TokenKind.IDENT:
            return self.parse_register_operand()
        if kind is TokenKind.NUM:
            return self.parse_immediate()
        raise ParseFailure("se esperaba un registro o un inmediato")

    def parse_base(self) -> Base:
        tok = self.current
        if tok.kind is not TokenKind.IDENT or not is_base(tok.text):
            raise ParseFailure("base inválida", hint="use d, x, b o s")
        self.advance()
        return Base(tok.text)

    def _parse_slot(self, slot: Slot) -> Operand:
        if slot is Slot.BASE:
            return self.parse_base()
        if slot is Slot.REG:
            return self.parse_register_operand()
        return self.parse_register_or_immediate()

    # ---- Instrucciones ----

    def _production(self, cspec: CSpec, keyword: Token) -> Command:
        name = cspec.kind.name
        destination: Optional[Reg] = None
        operands: List[Operand] = []
        if cspec.destination:
            try:
                destination = self.parse_register_operand()
            except ParseFailure as ex:
                raise ParseFailure(f"destino inválido para {name}: {ex.message}", ex.hint) from ex
        for i, slot in enumerate(cspec.operands):
            if operands or destination is not None:
                self.consume(TokenKind.COMMA)
            try:
                operands.append(self._parse_slot(slot))
            except ParseFailure as ex:
                which = f"{_SLOT_NAMES[i]} operando" if len(cspec.operands) > 1 else "operando"
                raise ParseFailure(f"{which} inválido para {name}: {ex.message}", ex.hint) from ex
        if not self.consume_line_terminator():
            raise ParseFailure(f"token inesperado tras {name}", hint="se esperaba fin de línea")
        a, b = (operands + [None, None])[:2]
        return Command(kind=cspec.kind, destination=destination, operand_a=a, operand_b=b,
                       line=keyword.line, col=keyword.col)

    def parse_command(self) -> Optional[Command]:
        """Analiza una instrucción. Devuelve None en EOF o si hubo error."""
        self.skip_blank_lines()
        if self.had_error or self.is_at_end():
            return None
        try:
            cspec = spec(self.current.kind)
        except KeyError:
            self.report("instrucción no reconocida")
            return None
        keyword = self.advance()
        try:
            return self._production(cspec, keyword)
        except ParseFailure as ex:
            self.report(ex.message, ex.hint)
        except MemoryError:
            self.report(f"sin memoria para construir {cspec.kind.name}")
        return None

    def parse_commands(self) -> List[Command]:
        """Analiza hasta EOF. Las instrucciones erróneas no dejan rastro en la lista."""
        commands: List[Command] = []
        while not self.is_at_end():
            cmd = self.parse_command()
            if cmd is not None:
                commands.append(cmd)
            if self.had_error:
                self.skip_to_next_line()
                self.had_error = False
        if log.isEnabledFor(logging.DEBUG):
            for line in to_listing_lines(commands):
                log.debug("%s", line)
        return commands

def parse(text: str, *, filename: Optional[str] = None,
          label_map: Optional[LabelMap] = None) -> Tuple[List[Command], List[Diagnostic]]:
    """
    Devuelve (commands, diagnostics).

    Reglas:
      - Una instrucción por línea: palabra clave + operandos separados por espacios
        (coma opcional entre operandos).
      - Comentarios: '#' o '//' hasta fin de línea.
      - Líneas en blanco permitidas entre instrucciones.
      - Una instrucción errónea produce exactamente un diagnóstico y se descarta.
    """
    p = Parser(Lexer(text), label_map, filename=filename)
    commands = p.parse_commands()
    return commands, p.diagnostics

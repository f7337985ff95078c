from __future__ import annotations
from typing import Iterable, List, Optional
from .ast import Command, Operand, Reg, Imm, Base

def format_operand(op: Optional[Operand]) -> str:
    if isinstance(op, Reg):
        return op.name
    if isinstance(op, Imm):
        return str(op.value)
    if isinstance(op, Base):
        return op.char
    return ""

def format_command(cmd: Command) -> str:
    """Texto fuente equivalente ('add x1 x2 5', 'print x 255')."""
    parts = [cmd.kind.value]
    for op in (cmd.destination, cmd.operand_a, cmd.operand_b):
        if op is not None:
            parts.append(format_operand(op))
    return " ".join(parts)

def to_listing_lines(commands: Iterable[Command]) -> List[str]:
    return [f"{i:04d}  {format_command(c)}" for i, c in enumerate(commands)]

def write_listing(commands: Iterable[Command], path: str) -> None:
    lines = to_listing_lines(commands)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

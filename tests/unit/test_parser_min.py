import pytest
from src.ci_parser.parser import parse, Parser
from src.ci_parser.lexer import Lexer
from src.ci_parser.tokens import TokenKind
from src.ci_parser.ast import CommandKind, Reg, Imm, Base, BranchCondition

def test_add_register_and_immediate():
    cmds, diags = parse("add x1 x2 5")
    assert not diags
    assert len(cmds) == 1
    add = cmds[0]
    assert add.kind is CommandKind.ADD
    assert add.destination == Reg(1)
    assert add.operand_a == Reg(2) and not add.is_a_immediate
    assert add.operand_b == Imm(5) and add.is_b_immediate
    assert add.branch_condition is BranchCondition.NONE
    assert (add.line, add.col) == (1, 1)

@pytest.mark.parametrize("src, kind, dest, a, b", [
    ("sub x3 7 x4", CommandKind.SUB, Reg(3), Imm(7), Reg(4)),
    ("mov x0 0b11", CommandKind.MOV, Reg(0), Imm(3), None),
    ("mov x31 x30", CommandKind.MOV, Reg(31), Reg(30), None),
    ("cmp x1 0x10", CommandKind.CMP, None, Reg(1), Imm(16)),
    ("cmp_u 1 2", CommandKind.CMP_U, None, Imm(1), Imm(2)),
    ("print d x9", CommandKind.PRINT, None, Base("d"), Reg(9)),
    ("add x1, x2, x3", CommandKind.ADD, Reg(1), Reg(2), Reg(3)),
    ("ADD x1 x2 x3", CommandKind.ADD, Reg(1), Reg(2), Reg(3)),
])
def test_each_kind(src, kind, dest, a, b):
    cmds, diags = parse(src + "\n")
    assert not diags
    assert len(cmds) == 1
    c = cmds[0]
    assert (c.kind, c.destination, c.operand_a, c.operand_b) == (kind, dest, a, b)

def test_print_hex_base():
    cmds, diags = parse("print x 0xFF\n")
    assert not diags
    p = cmds[0]
    assert p.kind is CommandKind.PRINT
    assert p.operand_a == Base("x") and p.is_a_string and not p.is_a_immediate
    assert p.operand_b == Imm(255) and p.is_b_immediate

def test_error_containment_scenario():
    cmds, diags = parse("add x1 x2 3\nbogus\nmov x3 x1\n")
    assert [c.kind for c in cmds] == [CommandKind.ADD, CommandKind.MOV]
    assert len(diags) == 1
    d = diags[0]
    assert d.severity == "error"
    assert d.token_text == "bogus" and d.line == 2 and d.col == 1
    assert d.token_kind is TokenKind.IDENT and d.token_length == 5
    assert cmds[1].line == 3

@pytest.mark.parametrize("bad", [
    "add x1 x2",            # falta operando
    "add 5 x2 x3",          # destino no es registro
    "add x1 x2 3 4",        # sobra un token
    "add x1 x2 3,",         # coma final
    "mov x32 1",            # registro fuera de rango
    "mov x1 x32",
    "mov x-1 1",
    "mov x1 0x1G",          # dígito hex inválido
    "mov x1 10x",           # basura al final
    "mov x1 foo",
    "cmp x1",
    "cmp_u x1 $",
    "print q x1",           # base inválida
    "print x",
    "print dx x1",
    "sub, x1 x2 x3",
    "bogus x1 x2",
    "x1",
    "42",
])
def test_malformed_yields_one_diagnostic_and_next_line_survives(bad):
    cmds, diags = parse(bad + "\nmov x2 7\n")
    assert len(diags) == 1
    assert diags[0].line == 1
    assert len(cmds) == 1
    assert cmds[0].kind is CommandKind.MOV and cmds[0].operand_a == Imm(7)

def test_malformed_last_line_at_eof():
    cmds, diags = parse("mov x2 7\nadd x1 x2")
    assert len(cmds) == 1
    assert len(diags) == 1
    assert diags[0].token_text == "<EOF>" and diags[0].token_kind is TokenKind.EOF

def test_blank_lines_only():
    cmds, diags = parse("\n\n   \n\n")
    assert cmds == [] and diags == []

def test_empty_source():
    assert parse("") == ([], [])

def test_blank_lines_between_instructions():
    src = "\n\nmov x1 1\n\n\n# comentario\n\nprint d x1\n\n"
    cmds, diags = parse(src)
    assert not diags
    assert [c.kind for c in cmds] == [CommandKind.MOV, CommandKind.PRINT]

def test_eof_terminator_without_newline():
    cmds, diags = parse("cmp x1 x2")
    assert not diags and len(cmds) == 1

def test_several_errors_each_reported_once():
    src = "mov x1 1\nmov x99 2\nfoo\nadd x1 x1 x1\nprint z 3\n"
    cmds, diags = parse(src, filename="p.ci")
    assert [c.kind for c in cmds] == [CommandKind.MOV, CommandKind.ADD]
    assert [d.line for d in diags] == [2, 3, 5]
    assert all(d.file == "p.ci" for d in diags)

def test_register_error_carries_hint():
    _, diags = parse("mov x32 1\n")
    assert "fuera de rango" in diags[0].hint
    assert diags[0].token_text == "x32"

def test_operand_failure_does_not_consume_token():
    p = Parser(Lexer("foo bar\n"))
    with pytest.raises(Exception):
        p.parse_register_or_immediate()
    assert p.current.text == "foo"

def test_advance_is_idempotent_at_eof():
    p = Parser(Lexer("mov"))
    assert p.advance().kind is TokenKind.MOV
    assert p.is_at_end()
    eof = p.advance()
    assert eof.kind is TokenKind.EOF
    assert p.advance() == eof and p.next == eof

def test_consume_line_terminator():
    p = Parser(Lexer("\n"))
    assert p.consume_line_terminator()       # NL
    assert p.is_at_end()
    assert p.consume_line_terminator()       # EOF, sin consumir
    assert p.is_at_end()
    p2 = Parser(Lexer("x1\n"))
    assert not p2.consume_line_terminator()
    assert p2.current.text == "x1"

def test_label_map_is_kept():
    labels = {"loop": 3}
    p = Parser(Lexer("mov x1 1\n"), labels)
    assert p.label_map is labels
    assert len(p.parse_commands()) == 1
    assert labels == {"loop": 3}

def test_commands_are_immutable():
    cmds, _ = parse("mov x1 1\n")
    with pytest.raises(Exception):
        cmds[0].operand_a = Imm(2)

def test_keyword_lookup_goes_through_grammar_table(monkeypatch):
    from src.ci_parser import isa
    monkeypatch.delitem(isa.SPEC, TokenKind.PRINT)
    cmds, diags = parse("print d x1\nmov x1 2\n")
    assert [c.kind for c in cmds] == [CommandKind.MOV]
    assert len(diags) == 1
    assert diags[0].message == "instrucción no reconocida"
    assert diags[0].token_text == "print"

from pathlib import Path

from toxlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_9_runtime_error_halts(capsys):
    with open(EXAMPLES / 'program_9.tox', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.interpret(ast)
    captured = capsys.readouterr()
    assert captured.out.strip() == 'before'
    assert captured.err.strip() == "Undefined variable 'missing'.\n[line 3]"

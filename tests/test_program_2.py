from pathlib import Path

from toxlang.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_precedence(capsys):
    with open(EXAMPLES / 'program_2.tox', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.interpret(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    # multiplication binds tighter, subtraction is left-associative
    assert out_lines == ['7', '5', '9', '3.5', '8', '4']

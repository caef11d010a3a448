import builtins
import json

import pytest

from toxlang.__main__ import EXIT_RUNTIME_ERROR, EXIT_SYNTAX_ERROR, main


def write_program(tmp_path, source, name='program.tox'):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return path


def test_run_file(tmp_path, capsys):
    path = write_program(tmp_path, 'let a = 2;\nlog a * 21;\n')
    main([str(path)])
    captured = capsys.readouterr()
    assert captured.out == '42\n'
    assert captured.err == ''


def test_syntax_error_exit_status(tmp_path, capsys):
    path = write_program(tmp_path, 'log "first";\nlog ;\n')
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == EXIT_SYNTAX_ERROR == 65
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "[line 2] Error at ';': Expect expression.\n"


def test_runtime_error_exit_status(tmp_path, capsys):
    path = write_program(tmp_path, 'log "before";\nlog -"x";\nlog "after";\n')
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == EXIT_RUNTIME_ERROR == 70
    captured = capsys.readouterr()
    assert captured.out == 'before\n'
    assert captured.err == 'Operand must be a number.\n[line 2]\n'


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'nope.tox')])
    assert exc.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_emit_and_run_ast(tmp_path, capsys):
    path = write_program(tmp_path, 'fn sq(x) { return x * x; }\nlog sq(7);\n')
    main(['--emit-ast', str(path)])
    ast_path = tmp_path / 'program.tox.ast.json'
    assert capsys.readouterr().out.strip() == str(ast_path)
    data = json.loads(ast_path.read_text(encoding='utf-8'))
    assert data[0]['type'] == 'FunctionStmt'

    main(['--ast', str(ast_path)])
    assert capsys.readouterr().out == '49\n'


def test_emit_ast_refuses_invalid_source(tmp_path):
    path = write_program(tmp_path, 'let = 1;')
    with pytest.raises(SystemExit) as exc:
        main(['--emit-ast', str(path)])
    assert exc.value.code == EXIT_SYNTAX_ERROR
    assert not (tmp_path / 'program.tox.ast.json').exists()


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = write_program(tmp_path, 'let a = 1;\n')
    main(['-vv', str(path)])
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'let a: number = 1' in trace


def test_prompt_keeps_state_between_lines(monkeypatch, capsys):
    lines = iter(['let a = 1;', 'log a + 1;', 'log ;', 'log missing;', 'log a;', 'exit'])
    monkeypatch.setattr(builtins, 'input', lambda prompt='': next(lines))
    main([])
    captured = capsys.readouterr()
    assert captured.out == "To exit type 'exit'\n2\n1\n"
    assert "Error at ';': Expect expression." in captured.err
    assert "Undefined variable 'missing'." in captured.err


def test_prompt_stops_at_end_of_input(monkeypatch, capsys):
    def no_input(prompt=''):
        raise EOFError

    monkeypatch.setattr(builtins, 'input', no_input)
    main([])
    assert capsys.readouterr().out == "To exit type 'exit'\n"


@pytest.mark.parametrize('content', [
    '{not json',
    '[{"type": "ClassStmt"}]',
    '{"type": "LogStmt"}',
    '[{"type": "LogStmt"}]',
])
def test_invalid_ast_file(tmp_path, capsys, content):
    path = tmp_path / 'broken.ast.json'
    path.write_text(content, encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        main(['--ast', str(path)])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith(f'Error: invalid AST file {path}: ')

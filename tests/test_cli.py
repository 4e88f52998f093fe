'''
Command line interface tests

Expressions are passed with -e, so nothing here reads stdin.
'''

from rpncalc.lexer import Lexer


def lines(text):
    return text.splitlines()


def test_result(cli, capsys):
    cli.run(args=['-e', '5 2 + 3 *'])
    out, err = capsys.readouterr()
    assert lines(out) == ['Result: 21.0']
    assert err == ''


def test_error_goes_to_stderr_and_continues(cli, capsys):
    cli.run(args=['-e', 'abc', 'clear', '16 sqrt'])
    out, err = capsys.readouterr()
    assert "Unknown token 'abc'" in err
    assert lines(out) == ['Stack cleared', 'Result: 4.0']


def test_show(cli, capsys):
    cli.run(args=['-e', 'show', '1 2', 'show', 'clear', 'show'])
    out, err = capsys.readouterr()
    assert lines(out) == ['Stack is empty',
                          'Stack (top to bottom): 2.0 1.0',
                          'Stack cleared',
                          'Stack is empty']
    assert 'Incomplete expression' in err


def test_history(cli, capsys):
    cli.run(args=['-e', 'history', '5 2 + 3 *', 'clear', '1 0 /', 'clear',
                  '10 fib', 'history', 'clearhist', 'history'])
    out, _ = capsys.readouterr()
    assert lines(out) == ['History is empty',
                          'Result: 21.0',
                          'Stack cleared',
                          'Stack cleared',
                          'Result: 55.0',
                          'History:',
                          cli.SEPARATOR,
                          '1. 5 2 + 3 * = 21.0',
                          '2. 10 fib = 55.0',
                          cli.SEPARATOR,
                          'History cleared',
                          'History is empty']


def test_quit(cli, capsys):
    cli.run(args=['-e', '1', 'quit', 'clear'])
    out, _ = capsys.readouterr()
    assert lines(out) == ['Result: 1.0']


def test_history_keeps_expression_text(cli, capsys):
    cli.run(args=['-e', '  5   2\t+  ', 'history'])
    out, _ = capsys.readouterr()
    assert '1. 5   2\t+ = 7.0' in lines(out)
    assert [entry.expression for entry in cli.history] == ['5   2\t+']


def test_commands_match_exactly(cli, capsys):
    cli.run(args=['-e', 'debug   on', '  debug on  ', 'clear'])
    out, err = capsys.readouterr()
    assert "Unknown token 'debug'" in err
    assert lines(out) == ['Debug mode on', 'Stack cleared']
    assert cli.machine.debug


def test_exit_and_blank_lines(cli, capsys):
    cli.run(args=['-e', '', '   ', '2', 'exit', 'clear'])
    out, err = capsys.readouterr()
    assert lines(out) == ['Result: 2.0']
    assert err == ''


def test_debug_commands(cli, capsys, caplog):
    caplog.set_level('INFO')
    cli.run(args=['-e', 'debug on', '5 2 +', 'debug off', '1 +'])
    out, _ = capsys.readouterr()
    assert lines(out) == ['Debug mode on',
                          'Result: 7.0',
                          'Debug mode off',
                          'Result: 8.0']
    assert caplog.messages == ['push 5.0', 'push 2.0', '5.0 + 2.0 = 7.0']


def test_debug_flag(cli, caplog):
    caplog.set_level('INFO')
    cli.run(args=['-d', '-e', '9 sqrt'])
    assert caplog.messages == ['push 9.0', 'sqrt(9.0) = 3.0']


def test_batch(cli, capsys):
    cli.run(args=['-b', '-e', '3 4 + 5 *', '1 0 /', '', '3 4'])
    out, _ = capsys.readouterr()
    out = lines(out)
    assert out[0] == 'Evaluating 3 expression(s):'
    assert out[1] == out[-1] == cli.SEPARATOR
    assert out[2] == 'Expression 1: 3 4 + 5 * = 35.0'
    assert out[3].startswith('Expression 2: 1 0 / -> Error: Division by zero')
    assert out[4].startswith('Expression 3: 3 4 -> Error: Incomplete')
    assert cli.machine.peekstack() == ()
    assert len(cli.history) == 1


def test_demo(cli, capsys):
    cli.run(args=['--demo'])
    out, err = capsys.readouterr()
    out = lines(out)
    assert '5 2 + 3 * = 21.0' in out
    assert '16 sqrt = 4.0' in out
    assert '10 fib = 55.0' in out
    assert 'Expression 1: 3 4 + 5 * = 35.0' in out
    assert 'Expression 2: 20 5 / 3 + = 7.0' in out
    assert 'Expression 3: 9 sqrt 2 * = 6.0' in out
    assert 'Expression 4: 5 fib 2 + = 7.0' in out
    assert err == ''


def test_dump(cli, capsys):
    cli.run(args=['-D', '-e', '5 sqrt + x'])
    out, _ = capsys.readouterr()
    assert lines(out) == ['<kind>\t<repr(token)>\t<arity>',
                          "number\t'5'\tNone",
                          "operator\t'sqrt'\t1",
                          "operator\t'+'\t2",
                          "unknown\t'x'\tNone"]


def test_raw_grammar(cli, capsys):
    cli.run(args=['-G'])
    out, _ = capsys.readouterr()
    assert out.rstrip('\n') == Lexer.LEXEME

'''
SRPN command line tests
'''

from pytest import raises

from srpn.cli import CLI
from srpn.lexer import Lexer


def test_expressions_share_one_session(capsys):
    assert CLI().run(args=['-e', '1 2', '-e', '+ =', '-e', 'd']) == 0
    assert capsys.readouterr().out.splitlines() == ['3', '3']


def test_expression_is_one_line(capsys):
    CLI().run(args=['-e', '1 2 + = d'])
    assert capsys.readouterr().out.splitlines() == ['3', '3']


def test_diagnostics_on_stdout(capsys):
    CLI().run(args=['-e', '= 5 0 /'])
    assert capsys.readouterr().out.splitlines() == ['Stack empty.',
                                                   'Divide by 0.']


def test_verbose(capsys):
    CLI().run(args=['-v', '-e', 'x'])
    captured = capsys.readouterr()
    assert captured.out == 'Unrecognised operator or operand "x"\n'
    assert 'x' in captured.err


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1 +2 d?'])
    assert capsys.readouterr().out.splitlines() == [
        '<kind>\t<repr(text)>\t<value>',
        "number\t'1'\t1",
        "number\t'2'\t2",
        "operator\t'+'\tADD",
        "command\t'd'\tDUMP",
        "unknown\t'?'\t?",
    ]


def test_raw_grammar_ignores_input(capsys):
    assert CLI().run(args=['-G']) == 0
    assert capsys.readouterr().out == Lexer.grammar + '\n'


def test_dump_and_grammar_exclusive():
    with raises(SystemExit):
        CLI().run(args=['-D', '-G'])


def test_expression_and_prompt_exclusive():
    with raises(SystemExit):
        CLI().run(args=['-e', '1', '-p'])

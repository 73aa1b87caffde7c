from io import StringIO

from pytest import fixture

from srpn.lexer import Lexer
from srpn.machine import Machine


@fixture
def lexer():
    return Lexer()


@fixture
def run():
    '''
    Feed lines to one fresh machine; return what it printed, line by line.

    The machine stays alive between calls, like a real session. It's
    reachable as run.machine.
    '''
    output = StringIO()
    machine = Machine(output=output)

    def run(*lines):
        start = output.tell()
        for line in lines:
            machine.execute(line)
        output.seek(start)
        printed = output.read().splitlines()
        output.seek(0, 2)
        return printed

    run.machine = machine
    return run

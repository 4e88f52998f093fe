from pytest import Item, fixture

from rpncalc.machine import Machine
from rpncalc.cli import CLI


@fixture
def machine():
    return Machine()


@fixture
def traced():
    '''
    Machine in debug mode, with its trace lines collected in .lines.
    '''
    lines = []
    m = Machine(debug=True, sink=lines.append)
    m.lines = lines
    return m


@fixture
def cli():
    return CLI()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Use with pytest -rP, and
    enable_assertion_pass_hook = true in the ini file.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))

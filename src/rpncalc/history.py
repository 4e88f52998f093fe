from collections import namedtuple


class HistoryEntry(namedtuple('HistoryEntry', ['expression', 'result'])):
    '''
    An expression that evaluated successfully, and what it evaluated to.
    '''
    __slots__ = ()

    def __str__(self):
        return '{} = {}'.format(self.expression, self.result)


class History:
    '''
    In-memory log of successful evaluations, oldest first.

    Gone when the process is.
    '''

    def __init__(self):
        self.entries = []

    def append(self, expression, result):
        entry = HistoryEntry(expression, result)
        self.entries.append(entry)
        return entry

    def clear(self):
        self.entries.clear()

    def lines(self):
        '''
        Yield numbered display lines, starting at 1.
        '''
        for i, entry in enumerate(self.entries, start=1):
            yield '{}. {}'.format(i, entry)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

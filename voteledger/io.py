"""Reading and writing plain-text ballot lists.

A ballot file holds one ballot per line, the voter identity followed by the
candidate index, separated by whitespace::

    # voter                                     index
    0x5b38da6a701c568545dcfcb03fcb875f56beddc4  0
    0xab8483f64d9c6d1ecf9b849ae677dd3315835cb2  2

Blank lines and lines starting with ``#`` are skipped. Indices are only
checked to be integers; whether they refer to a registered candidate is
decided by the ledger when the ballot is cast.
"""

from typing import Callable, Iterable, List, TextIO, Tuple

from voteledger.generate import Ballot


COMMENT_PREFIX = '#'


class BallotParseError(Exception):
    """A line of a ballot file does not hold a valid ballot.

    :param line_no: One-based number of the offending line.
    :param line: The offending line.
    """
    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f'invalid ballot on line {line_no}: {reason}')


def load_lines(lines: Iterable[str]) -> List[Ballot]:
    ballots = []
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        parts = line.split()
        if len(parts) != 2:
            raise BallotParseError(
                line_no, line, f'expected voter and index, got {len(parts)} fields'
            )
        voter, index = parts
        try:
            ballots.append(Ballot(voter, int(index)))
        except ValueError as err:
            raise BallotParseError(
                line_no, line, f'index {index!r} is not an integer'
            ) from err
    return ballots


def dump_lines(ballots: Iterable[Ballot]) -> Iterable[str]:
    for voter, index in ballots:
        voter = str(voter)
        if not voter or any(char.isspace() for char in voter):
            raise ValueError(f'voter identity {voter!r} cannot be written')
        yield f'{voter} {index}'


def loaders(line_loader: Callable[[Iterable[str]], List[Ballot]]
            ) -> Tuple[Callable[..., List[Ballot]], Callable[..., List[Ballot]]]:
    """Create load() and loads() functions from an iterating function."""
    def load(file: TextIO) -> List[Ballot]:
        return line_loader(file)

    def loads(text: str) -> List[Ballot]:
        return line_loader(iter(text.split('\n')))

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""
    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            if not line.endswith('\n'):
                line += '\n'
            file.write(line)

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line + ('' if line.endswith('\n') else '\n')
            for line in line_dumper(*args, **kwargs)
        )

    return dump, dumps


load, loads = loaders(load_lines)
dump, dumps = dumpers(dump_lines)

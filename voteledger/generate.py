"""Generate voters and ballots for ledger simulations.

Voters are given random identities shaped like account addresses
(``0x`` followed by 40 hexadecimal digits); each of them votes once for
a candidate picked uniformly at random. This reproduces a mass voting run
in which every participant uses a freshly created wallet.
"""

import random
from typing import Hashable, Iterable, List, NamedTuple, Optional

from voteledger.ledger import is_valid_index


ADDRESS_BITS = 160


class Ballot(NamedTuple):
    """A single vote to be submitted to a ledger."""
    voter: Hashable
    candidate_index: int


class AddressGenerator:
    """Generate distinct random voter identities.

    :param random_state: Seed for the random generator. If None, the
        identities are not reproducible.
    """
    def __init__(self, random_state: Optional[int] = None):
        self.random_state = random_state
        self._random = random.Random(random_state)

    def generate(self, n: int) -> List[str]:
        """Produce n identities, none of them repeated."""
        seen = set()
        addresses = []
        while len(addresses) < n:
            address = self._new_address()
            if address not in seen:
                seen.add(address)
                addresses.append(address)
        return addresses

    def _new_address(self) -> str:
        return '0x{:040x}'.format(self._random.getrandbits(ADDRESS_BITS))


class UniformBallotGenerator:
    """Generate ballots of distinct voters choosing candidates uniformly.

    :param n_candidates: Number of candidates the ballots may vote for;
        generated indices lie between 0 and ``n_candidates - 1``.
    :param random_state: Seed for both the identities and the choices.
    """
    def __init__(self,
                 n_candidates: int,
                 random_state: Optional[int] = None,
                 ):
        if n_candidates < 1:
            raise ValueError(
                f'need at least one candidate to vote for, got {n_candidates}'
            )
        self.n_candidates = n_candidates
        self.random_state = random_state
        self._random = random.Random(random_state)
        self._addresses = AddressGenerator(
            None if random_state is None else self._random.getrandbits(64)
        )

    def generate(self, n: int) -> List[Ballot]:
        return [
            Ballot(voter, self._random.randrange(self.n_candidates))
            for voter in self._addresses.generate(n)
        ]


def expected_tallies(ballots: Iterable[Ballot], n_candidates: int) -> List[int]:
    """Count the votes the ballots should give to each candidate.

    Only the first ballot of each voter counts and ballots with indices
    outside the candidate range are ignored, as a ledger would treat them.
    """
    counts = [0] * n_candidates
    seen = set()
    for voter, index in ballots:
        if voter in seen:
            continue
        if is_valid_index(index, n_candidates):
            counts[index] += 1
            seen.add(voter)
    return counts

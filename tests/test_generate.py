import sys
import os
import re

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import voteledger.generate
from voteledger.generate import Ballot

ADDRESS_RE = re.compile(r'^0x[0-9a-f]{40}$')


def test_addresses_distinct():
    addresses = voteledger.generate.AddressGenerator(random_state=1711).generate(1000)
    assert len(addresses) == 1000
    assert len(set(addresses)) == 1000
    assert all(ADDRESS_RE.match(addr) for addr in addresses)


def test_addresses_reproducible():
    first = voteledger.generate.AddressGenerator(random_state=5).generate(10)
    second = voteledger.generate.AddressGenerator(random_state=5).generate(10)
    assert first == second


@pytest.mark.parametrize('n_candidates', [1, 3, 7])
def test_uniform_ballots(n_candidates):
    gen = voteledger.generate.UniformBallotGenerator(n_candidates, random_state=1)
    ballots = gen.generate(1000)
    assert len(ballots) == 1000
    assert len({ballot.voter for ballot in ballots}) == 1000
    indices = {ballot.candidate_index for ballot in ballots}
    assert indices == set(range(n_candidates))


def test_uniform_ballots_reproducible():
    first = voteledger.generate.UniformBallotGenerator(7, random_state=3).generate(50)
    second = voteledger.generate.UniformBallotGenerator(7, random_state=3).generate(50)
    assert first == second


@pytest.mark.parametrize('n_candidates', [0, -1])
def test_uniform_ballots_no_candidates(n_candidates):
    with pytest.raises(ValueError):
        voteledger.generate.UniformBallotGenerator(n_candidates)


def test_expected_tallies():
    ballots = [
        Ballot('a', 0),
        Ballot('b', 2),
        Ballot('a', 1),
        Ballot('c', 99),
        Ballot('c', 1),
        Ballot('d', -1),
    ]
    assert voteledger.generate.expected_tallies(ballots, 3) == [1, 1, 1]


@pytest.mark.parametrize('index', [True, False, 1.0])
def test_expected_tallies_non_integer_index(index):
    ballots = [Ballot('x', index), Ballot('x', 1)]
    assert voteledger.generate.expected_tallies(ballots, 2) == [0, 1]

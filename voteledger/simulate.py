'''Mass voting simulation on a vote ledger.

Creates a ledger, lets a crowd of generated voters cast their ballots
(optionally from several threads at once) and checks that the resulting
tallies agree with what the ballots should have produced.
'''

from __future__ import annotations

import concurrent.futures
import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import voteledger.generate
from voteledger.generate import Ballot
from voteledger.ledger import Candidate, VoteError, VoteLedger


DEFAULT_CANDIDATES: Tuple[str, ...] = (
    'Socialdemokraterna',
    'Sverigedemokrater',
    'Vänsterpartiet',
    'Moderaterna',
    'Centerpartiet',
    'Kristdemokraterna',
    'Liberalerna',
)
DEFAULT_N_VOTERS = 1000

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class SimulationReport:
    '''Outcome of a simulated election.

    :param candidates: Final candidate snapshot from the ledger.
    :param expected: Tallies the submitted ballots should have produced,
        in candidate order.
    :param n_voters: Number of ballots submitted.
    :param n_rejected: Number of ballots the ledger rejected.
    '''
    candidates: Tuple[Candidate, ...]
    expected: List[int]
    n_voters: int
    n_rejected: int = 0

    @property
    def matches(self) -> bool:
        '''Whether the ledger tallies agree with the submitted ballots.'''
        tallies = [cand.vote_count for cand in self.candidates]
        return (
            tallies == list(self.expected)
            and sum(tallies) == self.n_voters - self.n_rejected
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'candidates': [cand.to_dict() for cand in self.candidates],
            'expected': list(self.expected),
            'n_voters': self.n_voters,
            'n_rejected': self.n_rejected,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SimulationReport:
        '''Recreate a report from the output of :meth:`to_dict`.

        Keys other than those written by :meth:`to_dict` are ignored.
        '''
        return cls(
            candidates=tuple(
                Candidate.from_dict(cand) for cand in data['candidates']
            ),
            expected=list(data['expected']),
            n_voters=data['n_voters'],
            n_rejected=data.get('n_rejected', 0),
        )


def cast_ballots(ledger: VoteLedger,
                 ballots: Sequence[Ballot],
                 n_workers: int = 1,
                 ) -> List[Optional[VoteError]]:
    '''Submit ballots to the ledger.

    :param ledger: The ledger to vote in.
    :param ballots: Ballots to cast. With a single worker, they are cast in
        the given order; with more workers, in whatever order the threads
        reach the ledger.
    :param n_workers: Number of threads submitting ballots concurrently.
    :returns: For every ballot, in input order, None if it was accepted or
        the rejection.
    '''
    if n_workers < 1:
        raise ValueError(f'need at least one worker, got {n_workers}')
    if n_workers == 1:
        return [ledger.try_cast_vote(*ballot) for ballot in ballots]
    with concurrent.futures.ThreadPoolExecutor(max_workers=n_workers) as pool:
        return list(pool.map(lambda b: ledger.try_cast_vote(*b), ballots))


def simulate(candidate_names: Iterable[str] = DEFAULT_CANDIDATES,
             n_voters: int = DEFAULT_N_VOTERS,
             random_state: Optional[int] = None,
             n_workers: int = 1,
             ) -> SimulationReport:
    '''Run an election of randomly voting distinct voters.

    :param candidate_names: Names to register in the ledger.
    :param n_voters: Number of voters, each casting one ballot for
        a uniformly chosen candidate.
    :param random_state: Seed for voter identities and their choices.
    :param n_workers: Number of threads casting the ballots.
    '''
    ledger = VoteLedger(candidate_names)
    ballots = voteledger.generate.UniformBallotGenerator(
        len(ledger), random_state=random_state
    ).generate(n_voters)
    return run_election(ledger, ballots, n_workers=n_workers)


def run_election(ledger: VoteLedger,
                 ballots: Sequence[Ballot],
                 n_workers: int = 1,
                 ) -> SimulationReport:
    '''Cast the ballots in the ledger and report how it went.'''
    logger.info('casting %d ballots with %d workers', len(ballots), n_workers)
    outcomes = cast_ballots(ledger, ballots, n_workers=n_workers)
    n_rejected = sum(1 for outcome in outcomes if outcome is not None)
    if n_rejected:
        logger.info('%d ballots rejected', n_rejected)
    return SimulationReport(
        candidates=ledger.get_candidates(),
        expected=voteledger.generate.expected_tallies(ballots, len(ledger)),
        n_voters=len(ballots),
        n_rejected=n_rejected,
    )


def format_results(candidates: Iterable[Candidate]) -> List[str]:
    return [f'{cand.name}: {cand.vote_count} votes' for cand in candidates]

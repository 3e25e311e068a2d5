'''The vote ledger: registered candidates, their tallies and who has voted.

A :class:`VoteLedger` is created once from an ordered list of candidate names.
Its candidate list never changes afterwards; the only mutation is
:meth:`VoteLedger.cast_vote`, which either records a vote completely (the
candidate tally grows by one and the voter is remembered) or rejects it with
a subclass of :class:`VoteError` without touching any state.

Voters are identified by arbitrary hashable values supplied by the caller.
The ledger does not authenticate them in any way; it only makes sure that
no identity is ever counted twice.

All operations on a single ledger are serialized by a lock held by the
ledger, so the ledger can be shared between threads.
'''

from __future__ import annotations

import dataclasses
import logging
import threading
from numbers import Integral
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple


logger = logging.getLogger(__name__)


class LedgerError(Exception):
    '''An operation on the vote ledger could not be carried out.'''
    pass


class NoCandidatesError(LedgerError, ValueError):
    '''A ledger was requested with an empty candidate list.'''
    def __init__(self):
        super().__init__('cannot create a vote ledger without candidates')


class VoteError(LedgerError):
    '''A vote was rejected. The ledger state is left unchanged.'''
    pass


class AlreadyVotedError(VoteError):
    '''The voter has already cast a successful vote.

    :param voter: Identity of the voter that attempted to vote again.
    '''
    def __init__(self, voter: Hashable):
        self.voter = voter
        super().__init__('You have already voted.')


class InvalidCandidateIndexError(VoteError):
    '''The vote refers to a candidate index that does not exist.

    :param index: The offending index, as given.
    :param n_candidates: Number of candidates registered in the ledger;
        valid indices are ``0`` to ``n_candidates - 1``.
    '''
    def __init__(self, index: Any, n_candidates: int):
        self.index = index
        self.n_candidates = n_candidates
        super().__init__('Invalid candidate index.')


@dataclasses.dataclass(frozen=True)
class Candidate:
    '''A read-only view of a registered candidate and their current tally.

    :param name: Display name the candidate was registered with.
    :param vote_count: Number of votes the candidate had received when the
        view was taken.
    '''
    name: str
    vote_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Candidate:
        return cls(name=data['name'], vote_count=data['vote_count'])


def is_valid_index(index: Any, n_candidates: int) -> bool:
    '''Tell whether a vote for the given index can be counted.

    Only integers from 0 to ``n_candidates - 1`` qualify; booleans and
    negative numbers do not.
    '''
    return (
        isinstance(index, Integral)
        and not isinstance(index, bool)
        and 0 <= index < n_candidates
    )


class VoteLedger:
    '''Records votes of distinct voters for a fixed list of candidates.

    :param candidate_names: Display names of the candidates, in the order
        that determines their indices. Must not be empty.
    :raises NoCandidatesError: If no candidate names are given.
    :raises TypeError: If any of the names is not a string.
    '''
    def __init__(self, candidate_names: Iterable[str]):
        names = tuple(candidate_names)
        if not names:
            raise NoCandidatesError()
        for name in names:
            if not isinstance(name, str):
                raise TypeError(
                    f'candidate names must be strings, got {name!r}'
                )
        self._names = names
        self._counts = [0] * len(names)
        self._voters = set()
        self._lock = threading.Lock()
        logger.info('created vote ledger with %d candidates', len(names))

    def cast_vote(self, voter: Hashable, candidate_index: int) -> None:
        '''Record a vote of the given voter for the candidate at an index.

        The voter is checked first, the index second, so a repeated vote
        with an invalid index is reported as a repeated vote.

        :param voter: Identity of the voter, as established by the caller.
        :param candidate_index: Index of the candidate in the registration
            order.
        :raises AlreadyVotedError: If the voter has voted before.
        :raises InvalidCandidateIndexError: If there is no candidate with
            the given index.
        '''
        with self._lock:
            if voter in self._voters:
                error = AlreadyVotedError(voter)
            elif not is_valid_index(candidate_index, len(self._names)):
                error = InvalidCandidateIndexError(
                    candidate_index, len(self._names)
                )
            else:
                error = None
                self._counts[candidate_index] += 1
                self._voters.add(voter)
        if error is not None:
            logger.info('rejecting vote by %s for index %r: %s',
                        voter, candidate_index, error)
            raise error
        logger.debug('%s voted for %s', voter, self._names[candidate_index])

    def try_cast_vote(self,
                      voter: Hashable,
                      candidate_index: int,
                      ) -> Optional[VoteError]:
        '''Like :meth:`cast_vote` but return the rejection instead of raising.

        :returns: None if the vote was recorded, the :class:`VoteError`
            describing the rejection otherwise.
        '''
        try:
            self.cast_vote(voter, candidate_index)
        except VoteError as err:
            return err
        return None

    def get_candidates(self) -> Tuple[Candidate, ...]:
        '''Return the candidates with their current tallies.

        The candidates are listed in registration order. The returned objects
        are a consistent snapshot and do not change with later votes.
        '''
        with self._lock:
            counts = list(self._counts)
        return tuple(
            Candidate(name, count) for name, count in zip(self._names, counts)
        )

    def tallies(self) -> List[int]:
        '''Return the vote counts of the candidates in registration order.'''
        with self._lock:
            return list(self._counts)

    def leaders(self) -> List[Candidate]:
        '''Return all candidates that share the highest vote count.'''
        candidates = self.get_candidates()
        top = max(cand.vote_count for cand in candidates)
        return [cand for cand in candidates if cand.vote_count == top]

    def has_voted(self, voter: Hashable) -> bool:
        with self._lock:
            return voter in self._voters

    @property
    def candidate_count(self) -> int:
        return len(self._names)

    @property
    def voter_count(self) -> int:
        with self._lock:
            return len(self._voters)

    @property
    def total_votes(self) -> int:
        with self._lock:
            return sum(self._counts)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f'<VoteLedger({len(self._names)} candidates)>'

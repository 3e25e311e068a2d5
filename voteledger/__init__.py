"""Voteledger - a ledger of votes cast by distinct voters.

A :class:`~voteledger.ledger.VoteLedger` registers a fixed, ordered list of
candidates and then accepts at most one vote per voter identity, keeping
a running tally for every candidate:

-   Casting votes and reading the tallies is done through the ledger itself
    (module ``ledger``), which rejects repeated voters and nonexistent
    candidates with subclasses of :class:`~voteledger.ledger.VoteError`.
-   Random voters and ballots for simulated elections are produced by the
    ``generate`` module; ballots can be read from and written to plain text
    files with the ``io`` module.
-   The ``simulate`` module runs whole elections, possibly from many threads,
    and checks the tallies against the ballots cast. It is also available
    from the command line as ``python -m voteledger``.
"""

from voteledger.ledger import (   # noqa: F401
    AlreadyVotedError,
    Candidate,
    InvalidCandidateIndexError,
    LedgerError,
    NoCandidatesError,
    VoteError,
    VoteLedger,
)

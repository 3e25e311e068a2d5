"""A commandline tool to run elections on a vote ledger.

Registers the given candidates, casts ballots (randomly generated ones
by default, or ones read from a ballot file) and prints the resulting
tallies. Generated elections are checked against the expected tallies.
"""

import argparse
import io
import json
import logging
import sys
import warnings
from typing import Iterable, Optional

import voteledger.generate
import voteledger.io
import voteledger.simulate
from voteledger.ledger import VoteLedger
from voteledger.simulate import DEFAULT_CANDIDATES, DEFAULT_N_VOTERS, \
    SimulationReport

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-c', '--candidates',
    nargs='+',
    default=list(DEFAULT_CANDIDATES),
    help='names of the candidates to register, in index order',
)
argparser.add_argument(
    '-n', '--n-voters',
    type=int,
    default=DEFAULT_N_VOTERS,
    help='number of randomly voting voters to generate',
)
argparser.add_argument(
    '-w', '--workers',
    type=int,
    default=1,
    help='number of threads casting ballots concurrently',
)
argparser.add_argument(
    '-r', '--random-state',
    type=int,
    help='seed for the generated voters and their choices',
)
argparser.add_argument(
    '-b', '--ballot-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='cast ballots from this file instead of generating them',
)
argparser.add_argument(
    '-o', '--output-ballots',
    type=argparse.FileType('w', encoding='utf8'),
    help='write the cast ballots to this file',
)
argparser.add_argument(
    '-j', '--json',
    dest='as_json',
    action='store_true',
    help='print the election report as JSON',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all ledger log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any ledger log messages',
)


def main(candidates: Iterable[str] = DEFAULT_CANDIDATES,
         n_voters: int = DEFAULT_N_VOTERS,
         workers: int = 1,
         random_state: Optional[int] = None,
         ballot_file: Optional[io.TextIOBase] = None,
         output_ballots: Optional[io.TextIOBase] = None,
         as_json: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> bool:
    """Run the election and print its results.

    :returns: Whether the ledger tallies match the cast ballots.
    """
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    ledger = VoteLedger(candidates)
    if ballot_file is not None:
        ballots = voteledger.io.load(ballot_file)
    else:
        ballots = voteledger.generate.UniformBallotGenerator(
            len(ledger), random_state=random_state
        ).generate(n_voters)
    if not ballots:
        warnings.warn('no ballots to cast, all tallies stay at zero')
    if output_ballots is not None:
        voteledger.io.dump(output_ballots, ballots)
    report = voteledger.simulate.run_election(ledger, ballots, n_workers=workers)
    if as_json:
        print(dump_json(report))
    else:
        show_report(report)
    return report.matches


def dump_json(report: SimulationReport) -> str:
    out = report.to_dict()
    out['matches'] = report.matches
    return json.dumps(out, ensure_ascii=False, indent=2)


def show_report(report: SimulationReport) -> None:
    print()
    print('Voting Results:')
    for line in voteledger.simulate.format_results(report.candidates):
        print(line)
    print()
    print(f'{report.n_voters} ballots cast, {report.n_rejected} rejected')
    if not report.matches:
        print('Tallies do NOT match the cast ballots:'
              f' expected {report.expected}')


if __name__ == '__main__':
    args = argparser.parse_args()
    sys.exit(0 if main(**vars(args)) else 1)

import sys
import os
import io
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import voteledger.__main__ as cli


def test_default_run(capsys):
    assert cli.main(n_voters=200, random_state=1)
    out = capsys.readouterr().out
    assert 'Voting Results:' in out
    assert 'Liberalerna: ' in out
    assert '200 ballots cast, 0 rejected' in out


def test_ballot_file(capsys):
    ballots = io.StringIO('addr1 0\naddr1 1\naddr2 99\n')
    assert cli.main(candidates=['Alice', 'Bob', 'Charlie'], ballot_file=ballots)
    out = capsys.readouterr().out
    assert 'Alice: 1 votes' in out
    assert 'Bob: 0 votes' in out
    assert '3 ballots cast, 2 rejected' in out


def test_json_output(capsys):
    assert cli.main(candidates=['A', 'B'], n_voters=10, random_state=3,
                    workers=4, as_json=True)
    out = json.loads(capsys.readouterr().out)
    assert out['matches']
    assert out['n_voters'] == 10
    assert [set(c) for c in out['candidates']] == [{'name', 'vote_count'}] * 2
    assert [c['name'] for c in out['candidates']] == ['A', 'B']
    assert sum(c['vote_count'] for c in out['candidates']) == 10


def test_output_ballots():
    out = io.StringIO()
    cli.main(candidates=['A', 'B'], n_voters=5, random_state=3,
             output_ballots=out, quiet=True)
    assert len(out.getvalue().splitlines()) == 5


def test_no_ballots_warns():
    with pytest.warns(UserWarning):
        assert cli.main(candidates=['A'], ballot_file=io.StringIO(''))


def test_argparser():
    args = cli.argparser.parse_args(['-c', 'X', 'Y', '-n', '3', '-j', '-r', '9'])
    assert args.candidates == ['X', 'Y']
    assert args.n_voters == 3
    assert args.as_json
    assert args.random_state == 9
    assert cli.argparser.parse_args([]).n_voters == 1000

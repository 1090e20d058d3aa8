import pytest

import cli


def test_solves_given_start(capsys):
    code = cli.main(["--start", "1 2 3 8 4 0 7 6 5"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Goal State:\n1 2 3\n8 0 4\n7 6 5\n")
    assert "Starting State:" in out
    assert "Solved!" in out
    assert "Moves (1): Left" in out
    assert "After Left:" in out


def test_seeded_shuffle_is_reproducible(capsys):
    assert cli.main(["--seed", "5", "--shuffle", "10"]) == 0
    first = capsys.readouterr().out
    assert cli.main(["--seed", "5", "--shuffle", "10"]) == 0
    second = capsys.readouterr().out
    assert "Random Starting State:" in first
    assert first == second


def test_custom_goal_and_trace(capsys):
    code = cli.main(["--start", "1,2,3,4,5,6,7,0,8", "--goal", "1,2,3,4,5,6,7,8,0", "--trace"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Expansion 1:" in out
    assert "Moves (1): Right" in out


def test_unsolvable_start_exits_nonzero(capsys):
    code = cli.main(["--start", "2 1 3 8 0 4 7 6 5"])
    out = capsys.readouterr().out
    assert code == 1
    assert "A* failed to find a solution." in out


def test_invalid_board_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--start", "1 2 3"])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        cli.main(["--shuffle", "-3"])
    assert exc.value.code == 2

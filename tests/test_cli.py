"""Tests for the play CLI."""

import pytest

from minmax_baseline.cli.play import play


def test_play_from_arguments(capsys):
    play(game="nim", depth=3, num_games=2, randomize_first_player=False, show_policy=True)
    out = capsys.readouterr().out
    assert "Initial position policy:" in out
    assert "minmax (policy 1) wins: 2" in out


def test_play_from_config(tmp_path, capsys):
    path = tmp_path / "match.yaml"
    path.write_text(
        "game: {id: nim, params: {tokens: 5, max_take: 3}}\n"
        "players:\n"
        "  - {id: minmax, params: {depth: 5, seed: 0}}\n"
        "  - {id: random, params: {seed: 1}}\n"
        "match: {num_games: 4, seed: 0}\n"
    )
    play(config=path)
    out = capsys.readouterr().out
    assert "minmax (policy 1) wins: 4" in out


def test_play_reports_bad_config(tmp_path, capsys):
    path = tmp_path / "match.yaml"
    path.write_text("game: {id: nope}\nplayers: [{id: minmax}, {id: random}]\n")
    with pytest.raises(SystemExit):
        play(config=path)
    assert "Error:" in capsys.readouterr().out


def test_play_rejects_zero_games(capsys):
    with pytest.raises(SystemExit):
        play(game="nim", depth=3, num_games=0)
    assert "num_games" in capsys.readouterr().out

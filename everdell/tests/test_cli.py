"""
Tests for the command-line interface.

Every command runs against a temporary data directory.
"""

import json

import pytest

from ..cli import main


def _run(tmp_path, *args):
    main(["--data-dir", str(tmp_path), *args])


def _new_game(tmp_path, capsys):
    _run(tmp_path, "new", "Ann", "Bo", "--seed", "5")
    out = capsys.readouterr().out
    first_line = out.splitlines()[0]
    assert first_line.startswith("Game created: ")
    return first_line[len("Game created: "):]


def _write_input(tmp_path, payload, name="input.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestCLI:
    """Tests for the everdell command."""

    def test_new_saves_snapshot(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)

        snapshot = json.loads((tmp_path / f"{game_id}.json").read_text(encoding="utf-8"))
        assert snapshot["game_state_id"] == 1
        assert [p["name"] for p in snapshot["players"]] == ["Ann", "Bo"]

    def test_apply_from_file(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)
        input_file = _write_input(
            tmp_path, {"input_type": "PLACE_WORKER", "location": "BASIC_ONE_BERRY"}
        )

        _run(tmp_path, "apply", game_id, input_file)

        out = capsys.readouterr().out
        assert "Game state: 2" in out
        assert "Active player:" in out
        snapshot = json.loads((tmp_path / f"{game_id}.json").read_text(encoding="utf-8"))
        assert snapshot["game_state_id"] == 2

    def test_apply_illegal_input(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)
        input_file = _write_input(
            tmp_path, {"input_type": "PLACE_WORKER", "location": "BASIC_ONE_STONE"}
        )
        _run(tmp_path, "apply", game_id, input_file)
        capsys.readouterr()

        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "apply", game_id, input_file)

        assert exc_info.value.code == 1
        assert "Error [ILLEGAL_ACTION]" in capsys.readouterr().out

    def test_apply_bad_json(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SystemExit):
            _run(tmp_path, "apply", game_id, str(path))

        assert "Invalid JSON" in capsys.readouterr().out

    def test_show_and_inputs(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)

        _run(tmp_path, "show", game_id)
        state = json.loads(capsys.readouterr().out)
        assert state["game_state_id"] == 1

        _run(tmp_path, "inputs", game_id)
        inputs = json.loads(capsys.readouterr().out)
        assert {"input_type": "PLACE_WORKER", "location": "BASIC_ONE_BERRY", "client_options": {}} in inputs

    def test_score(self, tmp_path, capsys):
        game_id = _new_game(tmp_path, capsys)

        _run(tmp_path, "score", game_id)

        assert capsys.readouterr().out.splitlines() == ["Ann: 0", "Bo: 0"]

    def test_missing_game(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(tmp_path, "show", "nope")

        assert exc_info.value.code == 1
        assert "Game not found: nope" in capsys.readouterr().out

    def test_no_command(self, tmp_path):
        with pytest.raises(SystemExit):
            _run(tmp_path)

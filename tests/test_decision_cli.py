import json

import pytest
import yaml
from click.testing import CliRunner

from decision_flow.cli.decision_cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def robot_file(tmp_path, runner):
    path = tmp_path / "robot.yaml"
    result = runner.invoke(cli, ["generate-problem", "--output", str(path)])
    assert result.exit_code == 0, result.output
    return path


@pytest.fixture
def tied_file(tmp_path):
    path = tmp_path / "tied.yaml"
    path.write_text(yaml.safe_dump({
        "name": "coin",
        "hypotheses": ["heads", "tails"],
        "probabilities": [0.5, 0.5],
        "decisions": [
            {"name": "A", "losses": [10.0, 0.0]},
            {"name": "B", "losses": [0.0, 10.0]},
        ],
    }))
    return path


def test_generate_problem_writes_yaml(robot_file):
    data = yaml.safe_load(robot_file.read_text())
    assert data["probabilities"] == [0.35, 0.65]
    assert [d["name"] for d in data["decisions"]] == ["A", "B"]


def test_choose(runner, robot_file):
    result = runner.invoke(cli, ["choose", str(robot_file)])

    assert result.exit_code == 0, result.output
    assert "Chosen: B" in result.output


def test_choose_saves_json(runner, robot_file, tmp_path):
    output = tmp_path / "result.json"
    result = runner.invoke(cli, ["choose", str(robot_file), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text())["chosen"] == ["B"]


def test_choose_all_on_tie(runner, tied_file):
    result = runner.invoke(cli, ["choose", str(tied_file), "--tie-break", "all"])

    assert result.exit_code == 0, result.output
    assert "Chosen: A, B" in result.output


def test_choose_reports_tie_under_first(runner, tied_file):
    result = runner.invoke(cli, ["choose", str(tied_file)])

    assert result.exit_code == 0, result.output
    assert "Chosen: A" in result.output
    assert "Tie within tolerance" in result.output


def test_choose_error_on_tie(runner, tied_file):
    result = runner.invoke(cli, ["choose", str(tied_file), "--tie-break", "error"])

    assert result.exit_code == 1
    assert "tie for minimum expected loss" in result.output


def test_choose_invalid_distribution(runner, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({
        "hypotheses": ["H1", "H2"],
        "probabilities": [0.5, 0.4],
        "decisions": [{"name": "A", "losses": [1.0, 2.0]}],
    }))
    result = runner.invoke(cli, ["choose", str(path)])

    assert result.exit_code == 1
    assert "not 1 within tolerance" in result.output


def test_choose_invalid_problem_file(runner, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"hypotheses": ["H1"]}))
    result = runner.invoke(cli, ["choose", str(path)])

    assert result.exit_code == 1
    assert "Invalid problem file" in result.output


def test_sweep(runner, robot_file):
    result = runner.invoke(cli, ["sweep", str(robot_file), "--points", "21"])

    assert result.exit_code == 0, result.output
    assert "A and B break even" in result.output
    assert "0.9524" in result.output


@pytest.mark.parametrize("belief_key", ["probabilities", "prior"])
def test_choose_tolerance_override_applies_to_beliefs(runner, tmp_path, belief_key):
    path = tmp_path / "loose.yaml"
    path.write_text(yaml.safe_dump({
        "hypotheses": ["H1", "H2"],
        belief_key: [0.35, 0.645],
        "decisions": [
            {"name": "A", "losses": [0.0, 1000.0]},
            {"name": "B", "losses": [50.0, 0.0]},
        ],
    }))

    strict = runner.invoke(cli, ["choose", str(path)])
    assert strict.exit_code == 1

    loose = runner.invoke(cli, ["choose", str(path), "--tolerance", "0.01"])
    assert loose.exit_code == 0, loose.output
    assert "Chosen: B" in loose.output


def test_sweep_reports_identical_decisions(runner, tmp_path):
    path = tmp_path / "same.yaml"
    path.write_text(yaml.safe_dump({
        "hypotheses": ["H1", "H2"],
        "probabilities": [0.5, 0.5],
        "decisions": [
            {"name": "A", "losses": [3.0, 1.0]},
            {"name": "B", "losses": [3.0, 1.0]},
        ],
    }))
    result = runner.invoke(cli, ["sweep", str(path), "--points", "3"])

    assert result.exit_code == 0, result.output
    assert "A and B tie at every P(H1)" in result.output
    assert "break even" not in result.output


def test_sweep_help_mentions_tie_break(runner):
    result = runner.invoke(cli, ["sweep", "--help"])

    assert result.exit_code == 0
    assert "tie_break" in result.output

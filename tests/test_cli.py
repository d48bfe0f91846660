"""Tests for the command-line interface."""

import json

import pytest

from bank_queue.scripts import run_simulation as cli
from bank_queue.config import SimulationConfig


def test_single_run_writes_json(test_output_dir):
    output = test_output_dir / "results.json"

    cli.main(['-l', '1.0', '-s', '3', '-q', '-o', str(output)])

    data = json.loads(output.read_text())
    assert data['config']['arrival_rate'] == 1.0
    assert data['result']['total_served'] == data['result']['total_arrived']
    assert data['report']['count'] == data['result']['total_served']


def test_single_run_prints_report(capsys):
    cli.main(['-l', '0.3', '-s', '5'])

    out = capsys.readouterr().out
    assert "SIMULATION RESULTS" in out
    assert "WAIT TIME ANALYSIS REPORT" in out
    assert "RECOMMENDATIONS" in out


def test_arrival_rate_is_prompted_when_missing(monkeypatch, capsys):
    monkeypatch.setattr('builtins.input', lambda prompt: "0.5")

    cli.main(['-s', '1'])

    assert "Total customers arrived" in capsys.readouterr().out


def test_non_numeric_prompt_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr('builtins.input', lambda prompt: "lots")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ['-l', '0'],
    ['-l', '-3'],
    ['-l', '1', '-n', '0'],
])
def test_invalid_parameters_exit_with_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_command_line_overrides_config_file(test_output_dir):
    path = test_output_dir / "config.json"
    path.write_text(json.dumps({'arrival_rate': 0.2, 'num_tellers': 2}))

    args = cli.parse_args(['--config', str(path), '-n', '3'])
    config = cli.build_config(args)

    assert config.arrival_rate == 0.2
    assert config.num_tellers == 3


def test_replications_summary(test_output_dir):
    output = test_output_dir / "replications.json"

    cli.main(['-l', '0.5', '-r', '3', '-s', '1', '-q', '-o', str(output)])

    summary = json.loads(output.read_text())
    assert summary['replications'] == 3
    assert set(summary['metrics']) == set(cli.REPLICATION_METRICS)
    for values in summary['metrics'].values():
        assert values['ci_low'] <= values['mean'] <= values['ci_high']
        assert values['min'] <= values['mean'] <= values['max']


def test_single_replication_has_zero_width_interval():
    summary = cli.run_replications(SimulationConfig(arrival_rate=0.5, seed=2))

    served = summary['metrics']['total_served']
    assert served['ci_low'] == served['mean'] == served['ci_high']


def test_replications_use_consecutive_seeds():
    config = SimulationConfig(arrival_rate=0.6, seed=10, replications=2)

    first = cli.run_replications(config)
    second = cli.run_replications(config)

    assert first == second


@pytest.mark.parametrize("settings", [
    {'arrival_rate': 0.5, 'num_tellers': 2.0},
    {'arrival_rate': 0.5, 'horizon': 60.0},
    {'arrival_rate': "0.5"},
])
def test_wrongly_typed_config_exits_with_error(settings, test_output_dir, capsys):
    path = test_output_dir / "config.json"
    path.write_text(json.dumps(settings))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--config', str(path), '-s', '1', '-q'])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_closed_stdin_exits_with_error(monkeypatch, capsys):
    def closed_input(prompt):
        raise EOFError

    monkeypatch.setattr('builtins.input', closed_input)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().out

import logging
import pathlib

import pytest

import tuna.__main__


def test_load_config_missing_file (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	with caplog.at_level(logging.WARNING):
		config = tuna.__main__.load_config(str(tmp_path / "missing.yaml"))

	assert config == {}
	assert "not found" in caplog.text


def test_load_config_reads_yaml (tmp_path: pathlib.Path) -> None:

	path = tmp_path / "config.yaml"
	path.write_text("standard:\n  frequency: 432.0\nfrequency_range:\n  minimum: 20.0\n  maximum: 4190.0\n")

	config = tuna.__main__.load_config(str(path))

	assert config["standard"]["frequency"] == 432.0
	assert config["frequency_range"]["maximum"] == 4190.0


def test_load_config_empty_file (tmp_path: pathlib.Path) -> None:

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert tuna.__main__.load_config(str(path)) == {}


def test_build_calculator_defaults () -> None:

	calculator = tuna.__main__.build_calculator({})

	assert calculator.standard.frequency == 440.0
	assert calculator.index_bounds.lower == -57
	assert calculator.index_bounds.upper == 39


def test_build_calculator_from_config () -> None:

	calculator = tuna.__main__.build_calculator({
		"standard": {"frequency": 432, "octave": 4},
		"frequency_range": {"minimum": 20.0, "maximum": 4190.0},
	})

	assert calculator.frequency_for_index(0) == 432.0
	assert calculator.validator.minimum == 20.0


def test_main_logs_notes (tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:

	monkeypatch.chdir(tmp_path)

	with caplog.at_level(logging.INFO):
		status = tuna.__main__.main(["440", "261.63"])

	assert status == 0
	assert "A4" in caplog.text
	assert "C4" in caplog.text


def test_main_reports_invalid_input (tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:

	monkeypatch.chdir(tmp_path)

	with caplog.at_level(logging.INFO):
		status = tuna.__main__.main(["abc", "1.0", "880"])

	assert status == 1
	assert "abc" in caplog.text
	assert "outside" in caplog.text
	assert "A5" in caplog.text


def test_main_reads_config_option (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A 415 Hz reference from --config makes 415 Hz read as A4 with no offset."""

	path = tmp_path / "baroque.yaml"
	path.write_text("standard:\n  frequency: 415.0\n")

	with caplog.at_level(logging.INFO):
		status = tuna.__main__.main(["--config", str(path), "415"])

	assert status == 0
	assert "Reference 415.0 Hz" in caplog.text
	assert "A4 (415.00 Hz, +0.0 cents)" in caplog.text
	assert "not found" not in caplog.text


def test_main_reports_each_non_numeric_value (tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:

	monkeypatch.chdir(tmp_path)

	with caplog.at_level(logging.INFO):
		status = tuna.__main__.main(["abc", "440", "xyz"])

	assert status == 1
	assert "abc: could not convert" in caplog.text
	assert "xyz: could not convert" in caplog.text
	assert "440 Hz -> A4" in caplog.text


def test_main_help_exits_cleanly (capsys: pytest.CaptureFixture) -> None:

	with pytest.raises(SystemExit) as exc_info:
		tuna.__main__.main(["--help"])

	assert exc_info.value.code == 0
	assert "--config" in capsys.readouterr().out

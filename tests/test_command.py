"""Tests for the command line tool."""

import sys
from unittest.mock import Mock

import pytest

from fishcomplete import command
from fishcomplete.command import CommandLineHost, complete_files, main, use_flag, use_param
from fishcomplete.models import ExitCode, LiteralCandidates, UseFileCompletion


@pytest.fixture
def no_config(monkeypatch, tmp_path):
    "Use a missing default config file and known executables"
    monkeypatch.setattr("fishcomplete.config_loader.CONFIG_FILE", tmp_path / "absent.toml")
    monkeypatch.setattr("fishcomplete.config.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def fish_output(monkeypatch):
    "Mocks the fish subprocess"
    invoke = Mock(return_value="")
    monkeypatch.setattr("fishcomplete.backends.fish.invoke", invoke)
    monkeypatch.setattr("fishcomplete.backends.bash.invoke", Mock(return_value=""))
    return invoke


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["fishcomplete", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def test_use_param(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["fishcomplete", "--config", "x.toml", "git"])
    assert use_param("--config") == "x.toml"
    assert sys.argv == ["fishcomplete", "git"]
    assert use_param("--debug") == ""


def test_use_flag(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["fishcomplete", "--describe", "git"])
    assert use_flag("--describe") is True
    assert use_flag("--describe") is False
    assert sys.argv == ["fishcomplete", "git"]


def test_host():
    host = CommandLineHost("git ch")
    assert host.get_current_input_line() == "git ch"
    assert not host.is_remote_context()
    assert host.existing_file_completion_fallback() == UseFileCompletion()


def test_complete_files(in_empty_dir):
    (in_empty_dir / "docs").mkdir()
    (in_empty_dir / "data.csv").write_text("")
    (in_empty_dir / "other").write_text("")

    assert complete_files("cat d") == ["data.csv", "docs/"]
    assert complete_files("cat ") == ["data.csv", "docs/", "other"]
    assert complete_files(f"cat {in_empty_dir}/o") == [f"{in_empty_dir}/other"]


def test_complete_files_keeps_tilde(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "notes").mkdir()
    assert complete_files("cd ~/no") == ["~/notes/"]


def test_literal_candidates(monkeypatch, capsys, no_config, fish_output, in_empty_dir):
    fish_output.return_value = "checkout\tswitch branches\ncherry-pick\tapply changes\n"

    assert run_main(monkeypatch, "git", "ch") == ExitCode.SUCCESS

    assert capsys.readouterr().out == "checkout\ncherry-pick\n"
    fish_output.assert_called_once()
    assert fish_output.call_args.args[1] == ["-c", "complete -C'git ch'"]


def test_describe(monkeypatch, capsys, no_config, fish_output, in_empty_dir):
    fish_output.return_value = "checkout\tswitch branches\ncherry-pick\n"

    assert run_main(monkeypatch, "--describe", "git ch") == ExitCode.SUCCESS

    assert capsys.readouterr().out == "checkout\tswitch branches\ncherry-pick\n"


def test_file_outcome(monkeypatch, capsys, no_config, fish_output, in_empty_dir):
    (in_empty_dir / "src").mkdir()
    fish_output.return_value = "src/\n"

    assert run_main(monkeypatch, "ls s") == ExitCode.SUCCESS

    assert capsys.readouterr().out == "src/\n"


def test_no_arguments(monkeypatch, capsys):
    assert run_main(monkeypatch) == ExitCode.USAGE_ERROR
    assert "Usage" in capsys.readouterr().out


def test_help(monkeypatch, capsys):
    assert run_main(monkeypatch, "--help") == ExitCode.SUCCESS
    assert "Usage" in capsys.readouterr().out


def test_bad_config(monkeypatch, tmp_path):
    fname = tmp_path / "bad.toml"
    fname.write_text("[fishcomplete\n")
    assert run_main(monkeypatch, "--config", str(fname), "git") == ExitCode.CONFIG_ERROR


def test_check(monkeypatch, capsys, no_config):
    assert run_main(monkeypatch, "check") == ExitCode.SUCCESS
    out = capsys.readouterr().out
    assert "primary: /usr/bin/fish" in out
    assert "secondary: /usr/bin/bash" in out
    assert "fallback: enabled" in out


def test_check_as_line_after_separator(monkeypatch, capsys, no_config, fish_output, in_empty_dir):
    assert run_main(monkeypatch, "--", "check") == ExitCode.SUCCESS

    assert "primary:" not in capsys.readouterr().out
    assert fish_output.call_args.args[1] == ["-c", "complete -Ccheck"]


def test_check_reports_errors(monkeypatch, capsys, tmp_path, no_config):
    fname = tmp_path / "config.toml"
    fname.write_text("[fishcomplete]\nfalback = true\n")

    assert run_main(monkeypatch, "--config", str(fname), "check") == ExitCode.CONFIG_ERROR
    assert "did you mean 'fallback'" in capsys.readouterr().out


def test_print_outcome_literal(capsys):
    command.print_outcome(LiteralCandidates(("a", "b")), "x ")
    assert capsys.readouterr().out == "a\nb\n"


def test_settings_passed_to_pipeline(monkeypatch, no_config, fish_output, in_empty_dir, tmp_path):
    fname = tmp_path / "config.toml"
    fname.write_text('[fishcomplete]\nsentinel_pattern = "^!"\n')

    run_main(monkeypatch, "--config", str(fname), "!make ")

    assert fish_output.call_args.args[1] == ["-c", "complete -C'make '"]

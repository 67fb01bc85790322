import os
import subprocess
from unittest import mock

import pytest

from ox import cli
from ox.cli import Cli, base_plugins
from ox.lifecycle.dev import DevCommand
from ox.lifecycle.generate import GenerateCommand
from ox.tools.help import HelpCommand
from ox.tools.version import VersionCommand


class FakeCommand:
    parent_name = ""

    def __init__(self, name="fake"):
        self.name = name
        self.calls = []

    def run(self, root, args):
        self.calls.append((root, list(args)))


class FakeSub(FakeCommand):
    parent_name = "fake"


@pytest.mark.parametrize(
    "alias, expected",
    [("g", "generate"), ("d", "dev"), ("v", "version"), ("h", "help")],
)
def test_find_command_by_alias(alias, expected):
    c = Cli([GenerateCommand(), DevCommand(), VersionCommand(), HelpCommand()])
    command = c.find_command(alias)
    assert command is not None
    assert command.name == expected


def test_find_command_by_name_and_missing():
    c = Cli([VersionCommand()])
    assert c.find_command("version").name == "version"
    assert c.find_command("nope") is None


def test_find_command_skips_subcommands():
    c = Cli([FakeSub("sub")])
    assert c.find_command("sub") is None


def test_use_remove_clear():
    c = Cli([HelpCommand()])
    c.use(VersionCommand(), FakeCommand())
    assert [p.name for p in c.plugins] == ["help", "version", "fake"]
    c.remove("help", "fake")
    assert [p.name for p in c.plugins] == ["version"]
    c.clear()
    assert c.plugins == []


def test_base_plugins_contains_core_commands():
    names = {p.name for p in base_plugins()}
    assert {"help", "version", "dev", "fix", "generate", "new"} <= names


def test_run_without_command_logs_error(capsys):
    Cli([FakeCommand()]).run(["ox"])
    assert "[error] no command provided, please provide one" in capsys.readouterr().out


def test_run_unknown_command(capsys):
    Cli([FakeCommand()]).run(["ox", "missing"])
    assert "did not find missing command" in capsys.readouterr().out


def test_run_uses_go_mod_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "go.mod").write_text("module example.com/app")
    inner = tmp_path / "inner"
    inner.mkdir()
    expected = os.getcwd()
    monkeypatch.chdir(inner)
    fake = FakeCommand()
    Cli([fake]).run(["ox", "fake", "x"])
    assert fake.calls == [(expected, ["fake", "x"])]


def test_run_without_go_mod_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    fake = FakeCommand()
    with pytest.raises(FileNotFoundError, match="go.mod not found"):
        Cli([fake]).run(["ox", "fake"])
    assert fake.calls == []


def test_run_root_finder_without_go_mod(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    Cli([VersionCommand()]).run(["ox", "v"])
    assert "ox version v1.5.3" in capsys.readouterr().out


def test_wrap_sets_environment_and_runs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GO111MODULE", "off")
    monkeypatch.setenv("CGO_ENABLED", "1")
    Cli([VersionCommand()]).wrap(["ox", "version"])
    assert os.environ["GO111MODULE"] == "on"
    assert os.environ["CGO_ENABLED"] == "0"
    assert "ox version" in capsys.readouterr().out


def test_wrap_delegates_to_local_main(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GO111MODULE", "off")
    monkeypatch.setenv("CGO_ENABLED", "1")
    (tmp_path / "go.mod").write_text("module example.com/app")
    (tmp_path / "cmd" / "ox").mkdir(parents=True)
    (tmp_path / "cmd" / "ox" / "main.go").write_text("package main")
    fake = FakeCommand()
    with mock.patch("subprocess.run") as run_mock:
        Cli([fake]).wrap(["ox", "fake", "arg"])
    run_mock.assert_called_once_with(
        ["go", "run", os.path.join("cmd", "ox", "main.go"), "fake", "arg"],
        check=True,
    )
    assert fake.calls == []


def test_wrap_propagates_subprocess_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GO111MODULE", "off")
    monkeypatch.setenv("CGO_ENABLED", "1")
    (tmp_path / "go.mod").write_text("module example.com/app")
    (tmp_path / "cmd" / "ox").mkdir(parents=True)
    (tmp_path / "cmd" / "ox" / "main.go").write_text("package main")
    error = subprocess.CalledProcessError(2, ["go"])
    with mock.patch("subprocess.run", side_effect=error):
        with pytest.raises(subprocess.CalledProcessError):
            Cli([]).wrap(["ox", "build"])


def test_shared_use_run_remove(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "go.mod").write_text("module example.com/app")
    fake = FakeCommand("shared-fake")
    cli.use(fake)
    try:
        cli.run(["ox", "shared-fake", "go"])
    finally:
        cli.remove("shared-fake")
    assert fake.calls == [(os.getcwd(), ["shared-fake", "go"])]
    cli.run(["ox", "shared-fake"])
    assert len(fake.calls) == 1


def test_main_success_and_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GO111MODULE", "off")
    monkeypatch.setenv("CGO_ENABLED", "1")
    assert cli.main(["ox", "version"]) == 0
    assert cli.main(["ox", "generate"]) == 1
    assert "[error] go.mod not found" in capsys.readouterr().out
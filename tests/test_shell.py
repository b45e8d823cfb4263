import io
import sys
from pathlib import Path

import pytest

from yush.command import Command
from yush.shell import Shell, ShellError
from yush.variables import system_name


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


def make_shell(home, stdin="", **extra):
    environ = {"HOME": str(home), "PATH": "", "USER": "tester", "NAME": "box"}
    environ.update(extra)
    return Shell(
        environ=environ,
        stdin=io.StringIO(stdin),
        out=io.StringIO(),
        err=io.StringIO(),
    )


def test_missing_home_raises():
    with pytest.raises(ShellError):
        Shell(environ={}, stdin=io.StringIO(), out=io.StringIO(), err=io.StringIO())


def test_initial_variables(home):
    shell = make_shell(home)
    assert shell.vars.get("SHELL") == "yush"
    assert shell.vars.get("SYSTEM") == system_name()
    assert shell.vars.get("USER") == "tester"


def test_environment_overrides_defaults(home):
    shell = make_shell(home, SHELL="other")
    assert shell.vars.get("SHELL") == "other"


def test_config_dir_created(home):
    shell = make_shell(home)
    assert (home / ".config" / "yush").is_dir()
    assert shell.out.getvalue() == "Auto creating config dir\n"
    assert (home / ".local" / "share" / "yush").is_dir()


def test_rc_file_is_run(home):
    config = home / ".config" / "yush"
    config.mkdir(parents=True)
    (config / "config.yush").write_text("set GREETING hello\n")
    shell = make_shell(home)
    assert shell.vars.get("GREETING") == "hello"
    assert len(shell.history) == 1


def test_read_script_missing(home, tmp_path):
    shell = make_shell(home)
    assert shell.read_script(tmp_path / "absent.yush") == []
    assert "not found" in shell.err.getvalue()


def test_read_script_joins_continuation(home, tmp_path):
    shell = make_shell(home)
    script = tmp_path / "s.yush"
    script.write_text("echo a \\\nb\nset X 1\n")
    texts = [command.text for command in shell.read_script(script)]
    assert texts == ["echo a \\b", "set X 1", ""]


def test_run_script_executes_commands(home, tmp_path):
    shell = make_shell(home)
    script = tmp_path / "s.yush"
    script.write_text("set X 1\necho $X\n")
    assert shell.run_script(script) == 0
    assert shell.out.getvalue().endswith("1 \n")
    assert list(shell.history) == ["set X 1", "echo $X"]


def test_run_script_status_of_unknown_command(home, tmp_path):
    shell = make_shell(home)
    script = tmp_path / "s.yush"
    script.write_text("no-such-program-here\n")
    assert shell.run_script(script) == 127


def test_exec_cmd_runs_function_body(home):
    shell = make_shell(home)
    shell.functions.set("greet", "echo hi\necho there")
    command = Command("greet")
    command.args = ["greet"]
    assert shell.exec_cmd(command) == 0
    assert shell.out.getvalue().endswith("hi \nthere \n")


def test_exec_cmd_alias_expands(home):
    shell = make_shell(home)
    shell.functions.set("say", "echo word")
    command = Command("say")
    command.parse(shell.vars, shell.functions)
    assert shell.exec_cmd(command) == 0
    assert shell.out.getvalue().endswith("word \n")


def test_exec_cmd_empty_args(home):
    shell = make_shell(home)
    assert shell.exec_cmd(Command("# only a comment")) == 0


def test_exec_cmd_unknown(home):
    shell = make_shell(home)
    assert shell.exec_cmd(Command("x", ["no-such-program-here"])) == 127


def test_exec_file_direct_path(home):
    shell = make_shell(home)
    command = Command("", [sys.executable, "-c", "raise SystemExit(3)"])
    assert shell.exec_file(command) == 3


def test_exec_file_searches_path(home):
    python = Path(sys.executable)
    shell = make_shell(home, PATH=str(python.parent))
    command = Command("", [python.name, "-c", "raise SystemExit(4)"])
    assert shell.exec_cmd(command) == 4


def test_prompt_status_zero(home):
    shell = make_shell(home)
    assert shell.prompt() == 0
    output = shell.out.getvalue()
    assert output.endswith("> ")
    assert "tester" in output and "box" in output


def test_prompt_shows_failure_status(home, tmp_path):
    shell = make_shell(home)
    script = tmp_path / "s.yush"
    script.write_text("no-such-program-here\n")
    shell.run_script(script)
    assert shell.prompt() == 127
    assert "127 > " in shell.out.getvalue()


def test_prompt_abbreviates_home(home, monkeypatch):
    monkeypatch.chdir(home)
    shell = make_shell(home)
    shell.prompt()
    assert "~" in shell.out.getvalue()


def test_read_line_plain(home):
    assert make_shell(home, "abc\n").read_line() == "abc"


def test_read_line_backspace(home):
    assert make_shell(home, "ab\x7fc\n").read_line() == "ac"


def test_read_line_cursor_left_insert(home):
    assert make_shell(home, "ac\x1b[Db\n").read_line() == "abc"


def test_read_line_history_recall(home):
    shell = make_shell(home, "\x1b[A\n")
    shell.history.add("older")
    shell.history.add("newer")
    assert shell.read_line() == "newer"


def test_read_line_history_down_clears(home):
    shell = make_shell(home, "\x1b[A\x1b[B\n")
    shell.history.add("older")
    assert shell.read_line() == ""


def test_read_line_eof(home):
    shell = make_shell(home, "xy")
    assert shell.read_line() == "xy"
    assert shell.at_eof


def test_run_interactive_exit_code(home):
    shell = make_shell(home, "set A 1\nexit 5\n")
    assert shell.run_interactive(False) == 5
    assert shell.vars.get("A") == "1"


def test_run_interactive_saves_history(home):
    shell = make_shell(home, "echo hi\nexit\n")
    assert shell.run_interactive(False) == 0
    saved = (home / ".local" / "share" / "yush" / "history").read_text()
    assert saved.splitlines() == ["echo hi"]


def test_run_interactive_with_prompt(home):
    shell = make_shell(home, "echo hi\nexit 2\n")
    assert shell.run_interactive(True) == 2
    assert "hi \n" in shell.out.getvalue()


def test_run_interactive_ends_at_eof(home):
    shell = make_shell(home, "set B 2")
    assert shell.run_interactive(False) == 0
    assert shell.vars.get("B") == "2"
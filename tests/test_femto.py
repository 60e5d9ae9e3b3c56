import io

from tinyshell.femto import PROMPT, FemtoShell, main

P = "Femto shell prompt > "


def _run(text):
    out = io.StringIO()
    status = FemtoShell(io.StringIO(text), out).run()
    return status, out.getvalue()


class _BrokenInput:
    def read(self):
        raise OSError("read failed")


def test_prompt_text_is_written_by_shell():
    status, out = _run("")
    assert status == 0
    assert out == PROMPT
    assert out == P


def test_echo_line():
    assert _run("echo hello\n") == (0, P + "hello\n" + P)


def test_echo_keeps_inner_spacing():
    status, out = _run("echo  spaced  out\n")
    assert status == 0
    assert out == P + " spaced  out\n" + P


def test_exit_says_goodbye():
    assert _run("exit\n") == (0, P + "Good Bye\n")


def test_invalid_command_sets_status():
    assert _run("foo\n") == (1, P + "Invalid command\n" + P)


def test_prompt_between_lines():
    status, out = _run("foo\necho hi\n")
    assert status == 0
    assert out == P + "Invalid command\n" + P + "hi\n" + P


def test_exit_stops_processing():
    status, out = _run("foo\nexit\necho x\n")
    assert status == 0
    assert out.endswith("Good Bye\n")
    assert "x\n" not in out


def test_empty_input():
    assert _run("") == (0, P)


def test_blank_line_prints_double_prompt():
    status, out = _run("  \nfoo")
    assert status == 1
    assert out == P + P + P + P + "Invalid command\n" + P


def test_empty_lines_only_prompt():
    assert _run("\n\necho a\n") == (0, P + P + P + "a\n" + P)


def test_read_error_returns_failure():
    out = io.StringIO()
    assert FemtoShell(_BrokenInput(), out).run() == 1
    assert out.getvalue() == P


def test_execute_variants():
    out = io.StringIO()
    shell = FemtoShell(io.StringIO(""), out)
    assert shell.execute("echo") == 0
    assert shell.execute("\\") == 0
    assert out.getvalue() == "\n\n"
    assert shell.execute("exit") is None
    assert shell.execute("exit now") == 1


def test_execute_blank():
    out = io.StringIO()
    assert FemtoShell(io.StringIO(""), out).execute(" \t") == 0
    assert out.getvalue() == P + P


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo main\nbogus\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == P + "main\n" + P + "Invalid command\n" + P
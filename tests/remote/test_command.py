"""Tests for cpu.remote.command."""

from __future__ import annotations

import pytest

from cpu.remote import (
    build_remote_command,
    make_environment,
    make_shell_wrapper,
    quote_command,
)

SAMPLE_ENVIRON = {
    "TERM": "xterm",
    "PAGER": "less",
    "PATH": "/bin",
    "HOME": "/x",
}


class TestMakeEnvironment:
    def test_forwards_term_and_pager_only(self) -> None:
        assert make_environment(SAMPLE_ENVIRON) == "TERM=xterm PAGER=less"

    def test_keeps_environment_order(self) -> None:
        environ = {"PAGER": "less", "HOME": "/x", "TERM": "screen"}
        assert make_environment(environ) == "PAGER=less TERM=screen"

    def test_exact_key_match(self) -> None:
        environ = {"TERMINAL": "kitty", "XPAGER": "more", "TERM_PROGRAM": "x"}
        assert make_environment(environ) == ""

    def test_empty(self) -> None:
        assert make_environment({}) == ""


class TestQuoteCommand:
    def test_safe_word_unquoted(self) -> None:
        assert quote_command("make") == "make"
        assert quote_command("./mach") == "./mach"

    def test_spaces_double_quoted(self) -> None:
        assert quote_command("echo hi") == '"echo hi"'

    def test_escapes_special_characters(self) -> None:
        assert quote_command('echo "$HOME" `id` \\') == (
            '"echo \\"\\$HOME\\" \\`id\\` \\\\"'
        )

    def test_single_quotes_kept(self) -> None:
        assert quote_command("echo 'a b'") == "\"echo 'a b'\""

    def test_empty(self) -> None:
        assert quote_command("") == '""'


class TestMakeShellWrapper:
    def test_bash(self) -> None:
        assert make_shell_wrapper("/bin/bash", "echo hi") == (
            'bash -ci "echo hi"'
        )

    def test_bash_by_name(self) -> None:
        assert make_shell_wrapper("bash", "make") == "bash -ci make"

    def test_bash_elsewhere(self) -> None:
        assert make_shell_wrapper("/usr/local/bin/bash", "ls -l") == (
            'bash -ci "ls -l"'
        )

    def test_bash_trailing_slash(self) -> None:
        assert make_shell_wrapper("/bin/bash/", "make") == "bash -ci make"

    def test_zsh_falls_back_to_quoted_command(self) -> None:
        wrapped = make_shell_wrapper("/bin/zsh", "echo hi")
        assert wrapped == '"echo hi"'
        assert "-ci" not in wrapped

    def test_no_shell(self) -> None:
        assert make_shell_wrapper("", "make") == "make"

    def test_unknown_shell_note_when_verbose(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_shell_wrapper("/bin/fish", "make", verbose=True)
        assert "unknown shell: /bin/fish" in capsys.readouterr().err

    def test_unknown_shell_quiet_by_default(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_shell_wrapper("/bin/fish", "make")
        assert capsys.readouterr().err == ""


class TestBuildRemoteCommand:
    def test_fallback_shell(self) -> None:
        cmd = build_remote_command(
            "~/proj", ["make"], "/bin/zsh", {"TERM": "xterm"}
        )
        assert cmd == "{ cd ~/proj && TERM=xterm make; }"

    def test_bash(self) -> None:
        cmd = build_remote_command(
            "/srv", ["ls", "-l"], "/bin/bash", SAMPLE_ENVIRON
        )
        assert cmd == (
            '{ cd /srv && TERM=xterm PAGER=less bash -ci "ls -l"; }'
        )

    def test_no_forwarded_environment(self) -> None:
        cmd = build_remote_command("~/proj", ["make"], "/bin/zsh", {})
        assert cmd == "{ cd ~/proj && make; }"

    def test_arguments_not_quoted_individually(self) -> None:
        cmd = build_remote_command(
            "~", ["grep", "-r", "foo bar", "*.py"], "/bin/bash", {}
        )
        assert cmd == '{ cd ~ && bash -ci "grep -r foo bar *.py"; }'

"""
Tests for StatusConsole output and the yes/no prompt
"""

import io

import pytest

from yams_setup.core.exceptions import InputClosedError


class TestStatusLines:
    """Tests for prefixed status lines"""

    def test_status_prefix(self, status_console, console_output):
        status_console.status("System updated")
        assert console_output() == "[✓] System updated\n"

    def test_error_prefix(self, status_console, console_output):
        status_console.error("Docker Compose not available")
        assert console_output() == "[✗] Docker Compose not available\n"

    def test_warning_prefix(self, status_console, console_output):
        status_console.warning("Expected Ubuntu 22.04, found 24.04")
        assert console_output() == "[!] Expected Ubuntu 22.04, found 24.04\n"

    def test_markup_in_message_is_literal(self, status_console, console_output):
        """Test that brackets in messages are not treated as rich markup"""
        status_console.status("Docker installed: [bold]x[/bold]")
        assert console_output() == "[✓] Docker installed: [bold]x[/bold]\n"

    def test_banner(self, status_console, console_output):
        status_console.banner("Installation complete!")
        rule = "=" * 42
        assert console_output() == f"{rule}\nInstallation complete!\n{rule}\n"

    def test_step_starts_with_blank_line(self, status_console, console_output):
        status_console.step("Step 1: Updating system packages...")
        assert console_output() == "\nStep 1: Updating system packages...\n"


class TestAskYesNo:
    """Tests for ask_yes_no"""

    @pytest.mark.parametrize("answer", ["y\n", "Y\n", "  y  \n"])
    def test_yes(self, status_console, answer):
        status_console.stdin = io.StringIO(answer)
        assert status_console.ask_yes_no("Continue? (y/n)") is True

    @pytest.mark.parametrize("answer", ["n\n", "N\n", "\n", "yes\n", "yy\n", "no\n"])
    def test_anything_else_is_no(self, status_console, answer):
        status_console.stdin = io.StringIO(answer)
        assert status_console.ask_yes_no("Continue? (y/n)") is False

    def test_reads_one_line_only(self, status_console):
        status_console.stdin = io.StringIO("n\ny\n")
        assert status_console.ask_yes_no("Continue? (y/n)") is False
        assert status_console.stdin.read() == "y\n"

    def test_eof_raises(self, status_console):
        status_console.stdin = io.StringIO("")
        with pytest.raises(InputClosedError) as exc_info:
            status_console.ask_yes_no("Continue? (y/n)")
        assert exc_info.value.exit_code == 1

    def test_answer_without_newline_raises(self, status_console):
        """Test that a partial line cut off by EOF is not accepted as an answer"""
        status_console.stdin = io.StringIO("y")
        with pytest.raises(InputClosedError):
            status_console.ask_yes_no("Continue? (y/n)")

    def test_question_printed_as_warning(self, status_console, console_output):
        status_console.stdin = io.StringIO("n\n")
        status_console.ask_yes_no("Run now? (y/n)")
        assert console_output().startswith("[!] Run now? (y/n)\n")

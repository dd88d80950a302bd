"""
Tests for the pwgen-install command line
"""
import pyperclip
import pytest
from click.testing import CliRunner

from pwgen_install import __version__, cli
from pwgen_install.cli import main
from pwgen_install.config import ConfigManager
from pwgen_install.platform.catalog import lookup
from pwgen_install.platform.detector import Platform

MACOS_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5)"
WINDOWS_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory so no stray config is picked up"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def copied(monkeypatch):
    """Capture clipboard writes made through pyperclip"""
    writes = []
    monkeypatch.setattr(pyperclip, 'copy', writes.append)
    return writes


@pytest.fixture
def no_clipboard(monkeypatch):
    def broken_copy(text):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")
    monkeypatch.setattr(pyperclip, 'copy', broken_copy)


class TestMain:

    def test_version(self, runner):
        result = runner.invoke(main, ['--version'])
        assert result.exit_code == 0
        assert f"v{__version__}" in result.output

    def test_help_without_command(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "interactive" in result.output


class TestDetect:

    def test_detects_identifier(self, runner):
        result = runner.invoke(main, ['detect', WINDOWS_UA])
        assert result.exit_code == 0
        assert "(windows)" in result.output

    def test_unknown_identifier_defaults(self, runner):
        result = runner.invoke(main, ['detect', 'curl/8.5.0'])
        assert "(linux)" in result.output


class TestShow:

    def test_uses_user_agent(self, runner):
        result = runner.invoke(main, ['show', '--user-agent', MACOS_UA])
        assert result.exit_code == 0
        assert "macos-x64.pkg" in result.output

    def test_user_agent_from_environment(self, runner):
        result = runner.invoke(main, ['show'], env={'PWGEN_USER_AGENT': WINDOWS_UA})
        assert "installer.exe" in result.output

    def test_platform_override(self, runner):
        result = runner.invoke(main, ['show', '-u', WINDOWS_UA, '-p', 'linux'])
        assert "sudo snap install pwgen-rust" in result.output

    def test_rejects_unknown_platform(self, runner):
        result = runner.invoke(main, ['show', '-p', 'amiga'])
        assert result.exit_code == 2


class TestCopy:

    def test_copies_command(self, runner, copied):
        result = runner.invoke(main, ['copy', '-u', MACOS_UA])
        assert result.exit_code == 0
        assert copied == [lookup(Platform.MACOS).command]
        assert "Copied!" in result.output

    def test_clipboard_failure_is_soft(self, runner, no_clipboard):
        result = runner.invoke(main, ['copy', '-p', 'windows'])
        assert result.exit_code == 0
        assert "Copied!" in result.output
        assert "Clipboard unavailable" in result.output

    def test_confirm_write_from_config(self, runner, no_clipboard, workdir):
        (workdir / ConfigManager.DEFAULT_CONFIG_NAME).write_text(
            "widget:\n  confirm_clipboard_write: true\n", encoding='utf-8'
        )
        result = runner.invoke(main, ['copy', '-p', 'windows'])
        assert result.exit_code == 0
        assert "Copied!" not in result.output
        assert "Copy" in result.output


class TestInteractive:

    def test_select_then_copy(self, runner, copied):
        result = runner.invoke(main, ['interactive', '-u', WINDOWS_UA], input="m\nc\nq\n")
        assert result.exit_code == 0
        assert copied == [lookup(Platform.MACOS).command]

    def test_quit_immediately(self, runner, copied):
        result = runner.invoke(main, ['interactive'], input="q\n")
        assert result.exit_code == 0
        assert copied == []


class TestDownload:

    def test_single_platform(self, runner):
        result = runner.invoke(main, ['download', '-p', 'windows'])
        assert result.exit_code == 0
        assert "Visual C++" in result.output
        assert "Cocoa framework" not in result.output


class TestConfigCommand:

    def test_init_writes_default(self, runner, workdir):
        result = runner.invoke(main, ['config', '--init'])
        assert result.exit_code == 0
        assert (workdir / ConfigManager.DEFAULT_CONFIG_NAME).exists()

        again = runner.invoke(main, ['config', '--init'])
        assert again.exit_code == 1

        forced = runner.invoke(main, ['config', '--init', '--force'])
        assert forced.exit_code == 0

    def test_show_settings(self, runner, workdir):
        result = runner.invoke(main, ['config'])
        assert result.exit_code == 0
        assert "Copied reset delay: 2.0s" in result.output
        assert "none (defaults)" in result.output

    def test_bracketed_config_path_is_literal(self, runner, tmp_path, monkeypatch):
        project = tmp_path / "[red]p"
        project.mkdir()
        (project / ConfigManager.DEFAULT_CONFIG_NAME).write_text(
            "widget:\n  copied_reset_delay: 3\n", encoding='utf-8'
        )
        monkeypatch.chdir(project)
        monkeypatch.setattr(cli.console, 'soft_wrap', True)
        result = runner.invoke(main, ['config'])
        assert result.exit_code == 0
        assert "[red]p" in result.output
        assert "Copied reset delay: 3.0s" in result.output

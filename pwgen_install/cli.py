#!/usr/bin/env python3
"""
PwGen Install Helper CLI - Command-line interface
Click-based front end for the quick install widget and download page
"""

import sys
import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich import print as rprint

from pwgen_install import __version__
from pwgen_install.config import ConfigManager, WidgetConfig
from pwgen_install.platform.detector import Platform, detect_platform, host_identifier
from pwgen_install.render import render_downloads, render_widget
from pwgen_install.widget import InstallWidget

# Force UTF-8 encoding for stdout/stderr on Windows to handle emojis
# This fixes UnicodeEncodeError on Windows terminals that default to cp1252
if sys.platform == 'win32':
    import io
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')

console = Console()

PLATFORM_CHOICE = click.Choice([p.value for p in Platform], case_sensitive=False)

# Interactive prompt keys
SELECT_KEYS = {
    'l': Platform.LINUX,
    'm': Platform.MACOS,
    'w': Platform.WINDOWS,
}


def print_banner():
    """Print PwGen Install Helper banner"""
    banner = f"""
[bold magenta]╔══════════════════════════════════════════════╗
║                                              ║
║        PwGen Install Helper v{__version__:<16}║
║                                              ║
╚══════════════════════════════════════════════╝[/bold magenta]
"""
    try:
        rprint(banner)
    except (UnicodeEncodeError, UnicodeDecodeError):
        # Terminals without box-drawing support
        print(f"\nPwGen Install Helper v{__version__}\n")


def _resolve_identifier(user_agent: Optional[str]) -> str:
    """User-agent from option/env var, else one synthesised for this machine"""
    return user_agent if user_agent else host_identifier()


def _build_widget(user_agent: Optional[str], config: WidgetConfig,
                  platform_value: Optional[str] = None) -> InstallWidget:
    widget = InstallWidget.from_config(_resolve_identifier(user_agent), config)
    widget.initialize()
    if platform_value:
        widget.select_platform(platform_value)
    return widget


def _print_widget(widget: InstallWidget, config: WidgetConfig):
    console.print(render_widget(widget.render(), code_theme=config.code_theme, show_note=config.show_note))


user_agent_option = click.option(
    '--user-agent', '-u', envvar='PWGEN_USER_AGENT', default=None,
    help='Environment identifier to detect from (default: this machine)')
platform_option = click.option(
    '--platform', '-p', 'platform_value', type=PLATFORM_CHOICE, default=None,
    help='Override the detected platform')


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version and exit')
@click.pass_context
def main(ctx, version):
    """
    PwGen Install Helper - Quick install for PwGen-rust

    Detects your platform and shows the matching install command.

    Examples:
        pwgen-install show              # Install command for this machine
        pwgen-install copy -p macos     # Copy the macOS command
        pwgen-install interactive       # Switch platforms and copy
        pwgen-install download          # Full download information
    """
    if version:
        click.echo(f"PwGen Install Helper v{__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        print_banner()
        click.echo(ctx.get_help())


@main.command()
@click.argument('identifier', required=False)
def detect(identifier):
    """
    Show the platform detected from IDENTIFIER.

    IDENTIFIER is a browser user-agent string; without it an identifier
    for this machine is used.
    """
    if identifier is None:
        identifier = host_identifier()
    detected = detect_platform(identifier)
    console.print(f"[dim]Identifier:[/dim] {escape(identifier)}", highlight=False)
    console.print(f"[bold cyan]Platform:[/bold cyan] {detected.display_name} ({detected.value})")


@main.command()
@platform_option
@user_agent_option
def show(platform_value, user_agent):
    """Show the quick install command."""
    config = ConfigManager.load_config()
    widget = _build_widget(user_agent, config, platform_value)
    _print_widget(widget, config)
    widget.close()


@main.command()
@platform_option
@user_agent_option
def copy(platform_value, user_agent):
    """Copy the quick install command to the clipboard."""
    config = ConfigManager.load_config()
    widget = _build_widget(user_agent, config, platform_value)
    widget.copy_command()
    _print_widget(widget, config)
    if widget.last_copy_failed:
        console.print("[dim]Clipboard unavailable - copy the command above manually[/dim]")
    widget.close()


@main.command()
@user_agent_option
def interactive(user_agent):
    """
    Pick a platform and copy its install command.

    Keys: l = Linux, m = macOS, w = Windows, c = copy, q = quit
    """
    config = ConfigManager.load_config()
    widget = _build_widget(user_agent, config)

    try:
        while True:
            _print_widget(widget, config)
            choice = Prompt.ask(
                "[cyan]Select[/cyan] [dim](l/m/w, c = copy, q = quit)[/dim]",
                choices=['l', 'm', 'w', 'c', 'q'],
                default='q',
                show_choices=False,
            )
            if choice == 'q':
                break
            if choice == 'c':
                widget.copy_command()
            else:
                widget.select_platform(SELECT_KEYS[choice])
    finally:
        widget.close()


@main.command()
@platform_option
def download(platform_value):
    """Show release downloads, alternatives and system requirements."""
    config = ConfigManager.load_config()
    selected = Platform.from_value(platform_value) if platform_value else None
    console.print(render_downloads(selected, code_theme=config.code_theme))
    console.print("\n[bold]🚀 Ready to get started?[/bold] [dim]See the Getting Started guide: /docs/getting-started[/dim]")


@main.command()
@click.option('--init', 'init_config', is_flag=True, help='Write a default .pwgen-install.yml here')
@click.option('--force', is_flag=True, help='Overwrite existing configuration')
def config(init_config, force):
    """
    Show PwGen Install Helper configuration.

    Displays the config file in use and the effective settings.
    """
    if init_config:
        target = Path.cwd() / ConfigManager.DEFAULT_CONFIG_NAME
        if target.exists() and not force:
            console.print(f"[yellow]{escape(str(target))} already exists (use --force to overwrite)[/yellow]")
            sys.exit(1)
        if not ConfigManager.save_config(WidgetConfig(), target):
            sys.exit(1)
        console.print(f"[green]✅ Created {escape(str(target))}[/green]")
        return

    config_path = ConfigManager.find_config()
    settings = ConfigManager.load_config(config_path)

    console.print("\n[bold cyan]PwGen Install Helper Configuration[/bold cyan]\n")
    shown_path = escape(str(config_path)) if config_path else '[dim]none (defaults)[/dim]'
    console.print(f"  Config file: {shown_path}")
    console.print(f"  Copied reset delay: {settings.copied_reset_delay}s")
    console.print(f"  Confirm clipboard write: {settings.confirm_clipboard_write}")
    console.print(f"  Code theme: {settings.code_theme}")
    console.print(f"  Show note: {settings.show_note}")

    identifier = host_identifier()
    console.print(f"\n[bold cyan]Detected platform:[/bold cyan] {detect_platform(identifier).display_name}")
    console.print(f"\n[bold cyan]PwGen Install Helper Version:[/bold cyan] v{__version__}")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
PwGen Install Helper Rendering
Rich renderables for the install widget and the download page
"""

from typing import Optional

from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from pwgen_install.platform.detector import Platform
from pwgen_install.platform import downloads
from pwgen_install.widget import WidgetView


def render_selector(active: Platform) -> Text:
    """Platform buttons row, active platform highlighted"""
    row = Text()
    for i, p in enumerate(Platform):
        if i:
            row.append("  ")
        if p is active:
            row.append(f"[ {p.display_name} ]", style="bold black on cyan")
        else:
            row.append(f"[ {p.display_name} ]", style="dim")
    return row


def render_widget(view: WidgetView, code_theme: str = "monokai", show_note: bool = True) -> Panel:
    """
    Render one frame of the install widget

    Args:
        view: Widget snapshot from InstallWidget.render()
        code_theme: Pygments theme for the command block
        show_note: Include the advisory note

    Returns:
        Panel ready for console.print
    """
    command = Panel(
        Syntax(view.command, "bash", theme=code_theme, word_wrap=True),
        title=view.title,
        title_align="left",
        border_style="blue",
    )
    button_style = "bold green" if view.copied else "bold"
    parts = [render_selector(view.platform), command, Text(view.button_text, style=button_style)]
    if show_note:
        parts.append(Text(view.note, style="italic"))

    return Panel(Group(*parts), title="🚀 Quick Install", border_style="magenta")


def _release_panel() -> Panel:
    release = downloads.LATEST_RELEASE
    body = Text()
    body.append("Release Date: ", style="bold")
    body.append(f"{release.date}\n")
    body.append("What's New: ", style="bold")
    body.append(release.highlights)
    return Panel(body, title=f"📦 Latest Release: v{release.version}", border_style="cyan")


def _platform_table(platform: Optional[Platform]) -> Table:
    table = Table(title="Platform Downloads", show_header=True, header_style="bold cyan", show_lines=True)
    table.add_column("Platform", style="cyan")
    table.add_column("Downloads")
    table.add_column("Package Manager")

    selected = [platform] if platform is not None else list(Platform)
    for p in selected:
        card = downloads.platform_downloads(p)
        links = "\n".join(f"{escape(link.title)}\n  [dim]{escape(link.url)}[/dim]" for link in card.links)
        package = f"[bold]{escape(card.package.title)}[/bold]\n{escape(card.package.command)}"
        if card.package_note:
            package += f"\n[dim]{escape(card.package_note)}[/dim]"
        table.add_row(f"{p.display_name}\n[dim]{escape(card.subtitle)}[/dim]", links, package)

    return table


def _alternatives_table() -> Table:
    table = Table(title="🔧 Alternative Installation Methods", show_header=True, header_style="bold cyan")
    table.add_column("Method", style="magenta")
    table.add_column("Command")
    for method in downloads.ALTERNATIVE_METHODS:
        table.add_row(Text(method.title), Text(method.command))
    return table


def _requirements_table(platform: Optional[Platform]) -> Table:
    table = Table(title="💻 System Requirements", show_header=True, header_style="bold cyan")
    selected = [platform] if platform is not None else list(Platform)
    for p in selected:
        table.add_column(p.display_name)
    table.add_row(*[Text("\n".join(downloads.system_requirements(p))) for p in selected])
    return table


def _verification_panel(code_theme: str) -> Panel:
    return Panel(
        Group(
            Text("All downloads are signed and include SHA256 checksums for verification:"),
            Syntax(downloads.VERIFICATION.command, "bash", theme=code_theme),
            Text.assemble(("PGP Key: ", "bold"), downloads.PGP_KEY_ID),
            Text(f"Public key: {downloads.PUBLIC_KEY_PATH}", style="dim"),
        ),
        title="🔐 Download Verification",
        border_style="cyan",
    )


def render_downloads(platform: Optional[Platform] = None, code_theme: str = "monokai") -> Group:
    """
    Render the download page

    Args:
        platform: Only show this platform's card and requirements (default: all)
        code_theme: Pygments theme for code blocks

    Returns:
        Group ready for console.print
    """
    return Group(
        _release_panel(),
        _platform_table(platform),
        _alternatives_table(),
        _requirements_table(platform),
        _verification_panel(code_theme),
    )

#!/usr/bin/env python3
"""
PwGen Install Helper Configuration Management
Handles .pwgen-install.yml configuration files
"""

import yaml
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass
from rich.console import Console
from rich.markup import escape

from pwgen_install import __version__

console = Console(stderr=True)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Get a config section, {} if missing or not a mapping"""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        console.print(f"[yellow]Warning: Ignoring '{name}' section in config: expected a mapping[/yellow]")
        return {}
    return section


def _flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    """Get a true/false setting; anything that is not a YAML boolean keeps the default"""
    value = section.get(key, default)
    if isinstance(value, bool):
        return value
    console.print(f"[yellow]Warning: Ignoring '{key}' in config: expected true or false[/yellow]")
    return default


@dataclass
class WidgetConfig:
    """PwGen Install Helper configuration structure"""

    # Version
    version: str = __version__

    # Widget behavior
    copied_reset_delay: float = 2.0  # seconds the "Copied!" acknowledgment stays up
    confirm_clipboard_write: bool = False  # hide acknowledgment when the write fails

    # Display settings
    code_theme: str = "monokai"
    show_note: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WidgetConfig':
        """Create config from dictionary"""
        config = cls()

        config.version = str(data.get('version', config.version))

        widget = _section(data, 'widget')
        delay = widget.get('copied_reset_delay', config.copied_reset_delay)
        try:
            delay = float(delay)
            if delay > 0:
                config.copied_reset_delay = delay
        except (TypeError, ValueError):
            pass  # keep default
        config.confirm_clipboard_write = _flag(
            widget, 'confirm_clipboard_write', config.confirm_clipboard_write
        )

        display = _section(data, 'display')
        config.code_theme = str(display.get('code_theme', config.code_theme))
        config.show_note = _flag(display, 'show_note', config.show_note)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for YAML export"""
        return {
            'version': self.version,
            'widget': {
                'copied_reset_delay': self.copied_reset_delay,
                'confirm_clipboard_write': self.confirm_clipboard_write,
            },
            'display': {
                'code_theme': self.code_theme,
                'show_note': self.show_note,
            },
        }


class ConfigManager:
    """Manage PwGen Install Helper configuration files"""

    DEFAULT_CONFIG_NAME = ".pwgen-install.yml"

    @staticmethod
    def find_config(start_path: Path = None) -> Optional[Path]:
        """
        Find .pwgen-install.yml by walking up directory tree

        Args:
            start_path: Starting directory (default: current directory)

        Returns:
            Path to .pwgen-install.yml or None if not found
        """
        current = (start_path or Path.cwd()).resolve()

        while True:
            config_file = current / ConfigManager.DEFAULT_CONFIG_NAME
            if config_file.exists():
                return config_file
            if current == current.parent:
                return None
            current = current.parent

    @staticmethod
    def load_config(config_path: Path = None) -> WidgetConfig:
        """
        Load configuration from .pwgen-install.yml

        Args:
            config_path: Path to config file (default: search from current dir)

        Returns:
            WidgetConfig object
        """
        if config_path is None:
            config_path = ConfigManager.find_config()

        # Return default config if no file found
        if config_path is None or not config_path.exists():
            return WidgetConfig()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            console.print(f"[yellow]Warning: Failed to load config from {config_path}: {escape(str(e))}[/yellow]")
            return WidgetConfig()

        if not isinstance(data, dict):
            return WidgetConfig()

        return WidgetConfig.from_dict(data)

    @staticmethod
    def save_config(config: WidgetConfig, config_path: Path) -> bool:
        """
        Save configuration to .pwgen-install.yml

        Args:
            config: WidgetConfig object
            config_path: Path where to save

        Returns:
            True if successful
        """
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(
                    config.to_dict(),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            return True

        except OSError as e:
            console.print(f"[red]Error: Failed to save config to {config_path}: {escape(str(e))}[/red]")
            return False

    @staticmethod
    def create_default_config(project_root: Path) -> Path:
        """
        Create default .pwgen-install.yml in project root

        Args:
            project_root: Project directory

        Returns:
            Path to created config file
        """
        config_path = project_root / ConfigManager.DEFAULT_CONFIG_NAME
        ConfigManager.save_config(WidgetConfig(), config_path)
        return config_path

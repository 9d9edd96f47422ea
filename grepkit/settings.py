"""Application settings kept as a JSON file in the per-user data directory."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Optional, Union

APP_NAME = "grepkit"
SETTINGS_FILE = "settings.json"


def _default_directory(app_name: str) -> Path:
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = str(Path.home() / "Library" / "Application Support")
    else:
        base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / app_name


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def _as_dict(value: Any) -> dict:
    return dict(value) if isinstance(value, dict) else {}


class Settings:
    """Sessions, collected patterns and paths, style, view options and editors.

    The settings are read when the object is created. If the directory cannot
    be created, ``error`` describes why and the defaults stay in place.
    """

    def __init__(self, directory: Optional[Union[str, os.PathLike]] = None) -> None:
        self.directory = Path(directory) if directory is not None else _default_directory(APP_NAME)
        self.error = ""
        self.sessions: list = []
        self.patterns: dict = {}
        self.paths: list = []
        self.style = ""
        self.view_options: dict = {}
        self.editors: list[dict] = []
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            self.error = f"Can not create directory {self.directory}"
        self.load()

    def settings_path(self) -> Path:
        return self.directory / SETTINGS_FILE

    def load(self) -> None:
        """Read the settings file; a missing or unreadable file changes nothing."""
        path = self.settings_path()
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError):
            return
        if not isinstance(data, dict):
            return
        self.sessions = _as_list(data.get("sessions"))
        self.patterns = _as_dict(data.get("patterns"))
        self.paths = _as_list(data.get("paths"))
        style = data.get("style")
        self.style = style if isinstance(style, str) else ""
        self.view_options = _as_dict(data.get("view"))
        self.editors.extend(_as_dict(editor) for editor in _as_list(data.get("editors")))

    def save(self) -> None:
        """Write the settings file."""
        data = {
            "editors": self.editors,
            "sessions": self.sessions,
            "patterns": self.patterns,
            "paths": self.paths,
            "style": self.style,
            "view": self.view_options,
        }
        with open(self.settings_path(), "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=4)
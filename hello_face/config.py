"""Settings of the configuration interface."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

APP_DIR_NAME = "linux-hello"
CONFIG_FILE_NAME = "config.json"


def _config_dir() -> Path | None:
    """The user's configuration directory for this platform, if known."""
    home = os.environ.get("HOME") or os.path.expanduser("~")
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None
    if sys.platform == "darwin":
        return Path(home) / "Library" / "Application Support" if home else None
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    if home and home != "~":
        return Path(home) / ".config"
    return None


def default_storage_path() -> Path:
    """Directory where embeddings are stored by default."""
    base = _config_dir()
    return (base or Path()) / APP_DIR_NAME


def _default_config_file() -> Path:
    return default_storage_path() / CONFIG_FILE_NAME


@dataclass
class GuiConfig:
    """Enrollment, detection and storage settings."""

    enrollment_frame_count: int = 30
    enrollment_timeout_secs: int = 120
    detection_confidence_threshold: float = 0.6
    quality_threshold: float = 0.5
    camera_device: str = "/dev/video0"
    storage_path: Path = field(default_factory=default_storage_path)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> GuiConfig:
        """Read settings from a JSON file; defaults when the file does not exist."""
        file = Path(path) if path is not None else _default_config_file()
        if not file.exists():
            return cls()
        data = json.loads(file.read_text(encoding="utf-8"))
        return cls._from_dict(data)

    def save(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write settings to a JSON file, creating its directory if needed."""
        file = Path(path) if path is not None else _default_config_file()
        file.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        data["storage_path"] = str(self.storage_path)
        file.write_text(json.dumps(data, indent=2), encoding="utf-8")

    @classmethod
    def _from_dict(cls, data: Any) -> GuiConfig:
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        config = cls()
        converters = {
            "enrollment_frame_count": int,
            "enrollment_timeout_secs": int,
            "detection_confidence_threshold": float,
            "quality_threshold": float,
            "camera_device": str,
            "storage_path": Path,
        }
        for item in fields(cls):
            if item.name in data:
                try:
                    value = converters[item.name](data[item.name])
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"invalid value for {item.name}: {exc}") from exc
                setattr(config, item.name, value)
        return config
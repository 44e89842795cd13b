"""Launches the QML configuration interface."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

SYSTEM_QML_PATH = "/usr/share/linux-hello/qml-modules/Linux/Hello/main.qml"
SOURCE_DIR_VARIABLE = "LINUX_HELLO_SOURCE_DIR"
QML_RUNNER = "qml6"

QML_IMPORT_PATHS = ":".join(
    [
        "/usr/lib/x86_64-linux-gnu/qt6/qml",
        "/usr/share/linux-hello/qml-modules",
    ]
)

QT_PLUGIN_PATHS = ":".join(
    [
        "/usr/lib/x86_64-linux-gnu/qt6/plugins",
        "/usr/lib/qt6/plugins",
    ]
)

QT_ENVIRONMENT = {
    "QML_IMPORT_PATH": QML_IMPORT_PATHS,
    "QML2_IMPORT_PATH": QML_IMPORT_PATHS,
    "QT_PLUGIN_PATH": QT_PLUGIN_PATHS,
    "QT_QPA_PLATFORMTHEME": "kde",
    "QT_QUICK_CONTROLS_STYLE": "org.kde.desktop",
    "QT_APPLICATION_DISPLAY_NAME": "Linux Hello",
    "QML_XHR_ALLOW_FILE_READ": "1",
    "QT_QPA_PLATFORM": "xcb;wayland;offscreen",
    "QT_STYLE_OVERRIDE": "org.kde.desktop",
    "QT_XCB_GL_INTEGRATION": "xcb_egl,none",
    "QT_DEBUG_PLUGINS": "0",
    "QML_BIND_IGNORE": "1",
}


def resolve_qml_path(manifest_dir: str | os.PathLike[str] | None = None) -> str:
    """The installed main QML file, or the one in the development tree."""
    if Path(SYSTEM_QML_PATH).exists():
        return SYSTEM_QML_PATH
    if manifest_dir is None:
        manifest_dir = os.environ.get(SOURCE_DIR_VARIABLE, ".")
    return str(Path(manifest_dir) / "qml" / "main.qml")


def build_environment(base: Mapping[str, str] | None = None) -> dict[str, str]:
    """The environment the QML runner is started with."""
    env = dict(os.environ if base is None else base)
    env.update(QT_ENVIRONMENT)
    return env


def main(argv: Sequence[str] | None = None) -> int:
    """Start the configuration interface and wait for it to exit."""
    parser = argparse.ArgumentParser(
        prog="linux-hello-config",
        description="Linux Hello configuration interface",
    )
    parser.parse_args(argv)

    qml_path = resolve_qml_path()
    print("🚀 Launching Linux Hello Configuration GUI", file=sys.stderr)
    print(f"  📂 QML path: {qml_path}", file=sys.stderr)
    print("  🔧 QML import paths configured", file=sys.stderr)

    try:
        subprocess.run([QML_RUNNER, qml_path], env=build_environment(), check=False)
    except OSError as exc:
        print(
            f"❌ Erreur lors du lancement de l'application QML : {exc}",
            file=sys.stderr,
        )
        print(
            "   Vérifie que 'qml6' est installé : sudo apt install qml-qt6",
            file=sys.stderr,
        )
        return 1
    return 0
"""Screens of the configuration interface."""

from __future__ import annotations

from enum import Enum


class Screen(Enum):
    """A screen of the configuration interface."""

    HOME = "home"
    ENROLLMENT = "enrollment"
    SETTINGS = "settings"
    MANAGE_FACES = "manage_faces"
"""Button states and their visual modifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ButtonState(Enum):
    """Interaction state of a button."""

    NORMAL = "normal"
    HOVER = "hover"
    PRESSED = "pressed"
    DISABLED = "disabled"

    def opacity(self) -> float:
        """Opacity modifier for this state."""
        return _OPACITY[self]

    def scale(self) -> float:
        """Scale factor for this state."""
        return _SCALE[self]


_OPACITY = {
    ButtonState.NORMAL: 1.0,
    ButtonState.HOVER: 1.1,
    ButtonState.PRESSED: 0.9,
    ButtonState.DISABLED: 0.5,
}

_SCALE = {
    ButtonState.NORMAL: 1.0,
    ButtonState.HOVER: 1.05,
    ButtonState.PRESSED: 0.98,
    ButtonState.DISABLED: 1.0,
}


@dataclass
class ButtonStates:
    """States of the configuration interface's buttons."""

    start_capture_btn: ButtonState = ButtonState.NORMAL
    stop_capture_btn: ButtonState = ButtonState.NORMAL
    home_btn: ButtonState = ButtonState.NORMAL
    enroll_btn: ButtonState = ButtonState.NORMAL
    settings_btn: ButtonState = ButtonState.NORMAL
    manage_btn: ButtonState = ButtonState.NORMAL

    @classmethod
    def initial(cls) -> ButtonStates:
        """States at start-up: no capture running, so stopping is disabled."""
        return cls(stop_capture_btn=ButtonState.DISABLED)
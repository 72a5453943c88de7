"""Controller snapshot: per-cycle button transitions and raw axis values

`ControllerSnapshot` is refreshed once per control cycle by calling `update()`.
Buttons go through `ButtonState.update`; axes are copied as reported.
"""
import logging
from types import MappingProxyType
from typing import Dict

from core.state import Axis, Button, ButtonState
from core.station import DriverStation, StationError

LOG = logging.getLogger("padstate.controller")

MIN_BUTTONS = 10
MIN_AXES = 6


class ControllerSnapshot:
    """Latest known input state of the controller on one driver station port.

    If the station reports fewer buttons or axes than expected, or a read raises
    StationError, the snapshot is left untouched and a warning is reported once.
    The warning stays suppressed until `reset()` is called, even if the device
    comes back in between.
    """

    def __init__(self, port, station: DriverStation, min_buttons: int = MIN_BUTTONS, min_axes: int = MIN_AXES):
        self._port = port
        self._station = station
        self._min_buttons = min_buttons
        self._min_axes = min_axes
        self._buttons: Dict[Button, ButtonState] = {}
        self._axes: Dict[Axis, float] = {}
        self._unplug_reported = False
        self._skipping = False
        self.reset()

    @property
    def port(self):
        return self._port

    @property
    def buttons(self):
        return MappingProxyType(self._buttons)

    @property
    def axes(self):
        return MappingProxyType(self._axes)

    @property
    def unplug_reported(self) -> bool:
        return self._unplug_reported

    def button(self, button: Button) -> ButtonState:
        return self._buttons[button]

    def axis(self, axis: Axis) -> float:
        return self._axes[axis]

    def update(self) -> bool:
        """Refresh from the station. Returns False if the device was not ready."""
        ds = self._station
        button_count = ds.get_stick_button_count(self._port)
        axis_count = ds.get_stick_axis_count(self._port)

        if button_count < self._min_buttons or axis_count < self._min_axes:
            return self._not_ready(f"buttons={button_count}, axes={axis_count}")

        # Read everything first so a failed read leaves the snapshot untouched
        try:
            mask = ds.get_stick_buttons(self._port)
            axes = {axis: ds.get_stick_axis(self._port, axis.value) for axis in Axis}
        except StationError as e:
            return self._not_ready(f"read failed: {e}")

        if self._skipping:
            LOG.debug("port %s ready again, resuming updates", self._port)
            self._skipping = False

        for button in Button:
            pressed = bool((mask >> button.value) & 1)
            self._buttons[button] = ButtonState.update(self._buttons[button], pressed)
        self._axes.update(axes)
        return True

    def _not_ready(self, reason: str) -> bool:
        if not self._skipping:
            LOG.debug("port %s not ready (%s); keeping last values", self._port, reason)
            self._skipping = True
        if not self._unplug_reported:
            self._unplug_reported = True
            self._station.report_warning(f"The controller on port {self._port} is not plugged in", False)
        return False

    def reset(self):
        """Set every button to NONE, every axis to 0.0 and re-arm the unplug warning."""
        for button in Button:
            self._buttons[button] = ButtonState.NONE
        for axis in Axis:
            self._axes[axis] = 0.0
        self._unplug_reported = False

    def to_dict(self) -> dict:
        return {
            "port": self._port,
            "buttons": {b.name: s.name for b, s in self._buttons.items()},
            "axes": {a.name: v for a, v in self._axes.items()},
        }

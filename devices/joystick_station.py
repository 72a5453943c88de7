"""Driver station backed by pygame.joystick

`JoystickStation` answers driver station queries for local game controllers.
A port is the pygame joystick index. Joysticks are opened lazily and dropped
again on hotplug or when pygame reports an error. A missing controller shows
up as zero buttons and zero axes; a read that fails raises StationError.
"""
import logging
import os

import pygame

from core.station import DriverStation, StationError

LOG = logging.getLogger("padstate.station")


class JoystickStation(DriverStation):
    def __init__(self):
        self._joysticks = {}
        self._started = False

    def _start(self):
        if self._started:
            return
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        pygame.init()
        pygame.joystick.init()
        self._started = True
        LOG.info("pygame joystick subsystem started (%d joystick(s) attached)", pygame.joystick.get_count())

    def _drop(self, port):
        if self._joysticks.pop(port, None) is not None:
            LOG.info("joystick on port %s released", port)

    def _joystick(self, port):
        self._start()
        js = self._joysticks.get(port)
        if js is not None:
            return js
        if not isinstance(port, int) or port < 0 or port >= pygame.joystick.get_count():
            return None
        js = pygame.joystick.Joystick(port)
        js.init()
        LOG.info("Found joystick: %s (port %d, axes=%d, buttons=%d)",
                 js.get_name(), port, js.get_numaxes(), js.get_numbuttons())
        self._joysticks[port] = js
        return js

    def _handle_hotplug(self):
        # Indices shift on any add/remove, so every cached handle may point at
        # the wrong device afterwards
        changed = [e for e in pygame.event.get()
                   if e.type in (pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED)]
        if changed and self._joysticks:
            LOG.info("joystick hotplug (%d event(s)); reopening by index", len(changed))
            for port in list(self._joysticks):
                self._drop(port)

    def get_stick_button_count(self, port) -> int:
        # First query of a cycle: drain events so reads and hotplug are current
        self._start()
        try:
            self._handle_hotplug()
            if isinstance(port, int) and port >= pygame.joystick.get_count():
                self._drop(port)
                return 0
            js = self._joystick(port)
            return js.get_numbuttons() if js is not None else 0
        except pygame.error as e:
            LOG.debug("pygame error on port %s: %s", port, e)
            self._drop(port)
            return 0

    def get_stick_axis_count(self, port) -> int:
        try:
            js = self._joystick(port)
            return js.get_numaxes() if js is not None else 0
        except pygame.error as e:
            LOG.debug("pygame error on port %s: %s", port, e)
            self._drop(port)
            return 0

    def _read_joystick(self, port):
        js = self._joystick(port)
        if js is None:
            raise StationError(f"no joystick on port {port}")
        return js

    def get_stick_buttons(self, port) -> int:
        try:
            js = self._read_joystick(port)
            mask = 0
            for i in range(js.get_numbuttons()):
                if js.get_button(i):
                    mask |= 1 << i
            return mask
        except pygame.error as e:
            self._drop(port)
            raise StationError(str(e)) from e

    def get_stick_axis(self, port, index: int) -> float:
        try:
            return float(self._read_joystick(port).get_axis(index))
        except pygame.error as e:
            self._drop(port)
            raise StationError(str(e)) from e

    def report_warning(self, message: str, print_trace: bool = False):
        LOG.warning("%s", message, stack_info=print_trace)

    def close(self):
        self._joysticks.clear()
        if self._started:
            pygame.joystick.quit()
            self._started = False

"""Entry point for padstate

Polls one controller through the pygame driver station once per cycle and logs
button transitions.
"""
import argparse
import logging
import threading

import yaml

from core.controller import MIN_AXES, MIN_BUTTONS, ControllerSnapshot
from devices.joystick_station import JoystickStation

LOG = logging.getLogger("padstate.app")

DEFAULTS = {
    "port": 0,
    "hz": 50.0,
    "min_buttons": MIN_BUTTONS,
    "min_axes": MIN_AXES,
}

_SETTING_TYPES = {
    "port": int,
    "hz": (int, float),
    "min_buttons": int,
    "min_axes": int,
}


def load_settings(path: str) -> dict:
    """Read a YAML settings file. Unknown keys and wrong types raise ValueError."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    for key, value in data.items():
        if key not in _SETTING_TYPES:
            raise ValueError(f"{path}: unknown setting {key!r}")
        if isinstance(value, bool) or not isinstance(value, _SETTING_TYPES[key]):
            raise ValueError(f"{path}: setting {key!r} has invalid value {value!r}")
    return data


def resolve_settings(args) -> dict:
    """Defaults, then the YAML file, then explicit command line flags."""
    settings = dict(DEFAULTS)
    if args.config:
        settings.update(load_settings(args.config))
    for key in ("port", "hz"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    if settings["hz"] <= 0:
        raise ValueError(f"hz must be positive, got {settings['hz']!r}")
    return settings


def positive_float(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value


def log_transitions(controller: ControllerSnapshot):
    for button, state in controller.buttons.items():
        if state.is_edge:
            LOG.info("%s %s", button.name, state.value)


def run(controller: ControllerSnapshot, hz: float, stop_event: threading.Event, cycles=None):
    """Call `update()` once per period until `stop_event` is set or `cycles` ran out."""
    if hz <= 0:
        raise ValueError(f"hz must be positive, got {hz!r}")
    period = 1.0 / hz
    count = 0
    while not stop_event.is_set():
        if cycles is not None and count >= cycles:
            break
        if controller.update():
            log_transitions(controller)
            if LOG.isEnabledFor(logging.DEBUG):
                LOG.debug("snapshot -> %s", controller.to_dict())
        count += 1
        stop_event.wait(period)
    return count


def main():
    parser = argparse.ArgumentParser(description="padstate: controller snapshot monitor")
    parser.add_argument("--port", type=int, default=None, help="joystick index (default: 0)")
    parser.add_argument("--hz", type=positive_float, default=None, help="update frequency (default: 50)")
    parser.add_argument("--config", default=None, help="YAML settings file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'controller', 'station', 'app')")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    for module in args.debug_modules:
        logging.getLogger(f"padstate.{module}").setLevel(logging.DEBUG)

    settings = resolve_settings(args)
    station = JoystickStation()
    controller = ControllerSnapshot(settings["port"], station,
                                    min_buttons=settings["min_buttons"],
                                    min_axes=settings["min_axes"])
    stop_event = threading.Event()

    try:
        LOG.info("padstate running on port %s at %s Hz, press Ctrl+C to stop",
                 settings["port"], settings["hz"])
        run(controller, settings["hz"], stop_event)
    except KeyboardInterrupt:
        LOG.info("shutdown requested")
    finally:
        station.close()


if __name__ == "__main__":
    main()

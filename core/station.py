"""Driver station abstraction: device queries plus warning reports"""
import abc


class StationError(Exception):
    """A read failed after the device passed the presence check."""


class DriverStation(abc.ABC):
    """Source of raw controller data for one or more ports.

    Ports are opaque keys; each concrete station decides what they mean.
    """

    @abc.abstractmethod
    def get_stick_button_count(self, port) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def get_stick_axis_count(self, port) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def get_stick_buttons(self, port) -> int:
        """Bitmask of pressed buttons; bit i set means button i is down.

        Raises StationError if the device cannot be read.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def get_stick_axis(self, port, index: int) -> float:
        raise NotImplementedError

    @abc.abstractmethod
    def report_warning(self, message: str, print_trace: bool = False):
        raise NotImplementedError

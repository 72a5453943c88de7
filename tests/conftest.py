import pytest

from core.station import DriverStation, StationError


class FakeStation(DriverStation):
    """In-memory driver station; tests poke `buttons`, `axes` and the counts directly."""

    def __init__(self, button_count=10, axis_count=6):
        self.button_count = button_count
        self.axis_count = axis_count
        self.buttons = 0
        self.axes = {}
        self.warnings = []
        self.failing_axis = None

    def get_stick_button_count(self, port):
        return self.button_count

    def get_stick_axis_count(self, port):
        return self.axis_count

    def get_stick_buttons(self, port):
        return self.buttons

    def get_stick_axis(self, port, index):
        if index == self.failing_axis:
            raise StationError(f"axis {index} unreadable")
        return self.axes.get(index, 0.0)

    def report_warning(self, message, print_trace=False):
        self.warnings.append((message, print_trace))


@pytest.fixture
def station():
    return FakeStation()

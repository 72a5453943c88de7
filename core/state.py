"""State models: button transition states and input identifiers"""
from enum import Enum


class ButtonState(Enum):
    """Edge-aware status of a single button across one update step.

      PRESSED:   the button just went from up to down
      RELEASED:  the button just went from down to up
      HELD_DOWN: the button was down and stays down
      NONE:      the button was up and stays up
    """
    PRESSED = "pressed"
    RELEASED = "released"
    HELD_DOWN = "held_down"
    NONE = "none"

    @property
    def is_down(self) -> bool:
        return self in (ButtonState.PRESSED, ButtonState.HELD_DOWN)

    @property
    def is_edge(self) -> bool:
        return self in (ButtonState.PRESSED, ButtonState.RELEASED)

    @staticmethod
    def update(previous: "ButtonState", current: bool) -> "ButtonState":
        """Return the new state given the previous state and the raw button value."""
        if current:
            return ButtonState.HELD_DOWN if previous.is_down else ButtonState.PRESSED
        return ButtonState.RELEASED if previous.is_down else ButtonState.NONE


class Button(Enum):
    """Tracked buttons; the value is the bit index in the driver station mask"""
    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    LEFT_STICK = 8
    RIGHT_STICK = 9


class Axis(Enum):
    """Tracked axes; the value is the driver station axis index"""
    LEFT_X = 0
    RIGHT_X = 1
    LEFT_TRIGGER = 2
    RIGHT_TRIGGER = 3
    LEFT_Y = 4
    RIGHT_Y = 5

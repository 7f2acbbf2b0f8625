"""Validation errors raised by the Martian Robots core."""

from typing import Optional


class SimulationError(ValueError):
    """Base class for every validation failure in the simulation."""

    def __init__(self, token: str, value: object, reason: str):
        self.token = token
        self.value = value
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        return f"{self.token} {self.value!r}: {self.reason}"


class InvalidDimension(SimulationError):
    """Malformed, negative, oversized or degenerate surface size."""

    def _format(self) -> str:
        return f"Surface {self.token} {self.value!r}: {self.reason}"


class InvalidPlacement(SimulationError):
    """Malformed coordinate/orientation token, or a coordinate off the surface."""

    def _format(self) -> str:
        return f"Robot {self.token} {self.value!r}: {self.reason}"


class InvalidCommandSequence(SimulationError):
    """Unrecognized command character or sequence over the maximum length."""

    def __init__(self, value: object, reason: str, index: Optional[int] = None):
        self.index = index
        super().__init__('commands', value, reason)

    def _format(self) -> str:
        if self.index is None:
            return f"Command sequence {self.value!r}: {self.reason}"
        return (f"Command at index {self.index} in sequence "
                f"{self.value!r}: {self.reason}")

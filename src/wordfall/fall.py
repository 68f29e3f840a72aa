"""Fall controller — moves the active word down one fixed step per fall tick."""

from __future__ import annotations

from wordfall.models import FallEvent, PositionUpdated, RenderListener


class FallController:
    """Owns the falling word's position and speed.

    Speed is a distance per tick, not per second: the fall tick runs at a fixed
    cadence, so no delta time enters the step. Speed survives word changes; a
    new session gets a new controller starting at ``start_speed``.
    """

    def __init__(
        self,
        start_speed: float,
        max_speed: float,
        floor_y: float,
        tolerance: float = 0.0,
        emit: RenderListener | None = None,
    ) -> None:
        self.start_speed = start_speed
        self.max_speed = max_speed
        self.floor_y = floor_y
        self.tolerance = tolerance
        self._emit = emit
        self.position_y: float = 0.0
        self.speed: float = start_speed
        self._landed = False

    def reset(self, start_offset: float) -> None:
        """Place a new word at ``start_offset`` (negative is above the top edge)."""
        self.position_y = start_offset
        self._landed = False
        if self._emit:
            self._emit(PositionUpdated(y=self.position_y))

    def tick(self) -> FallEvent:
        if self._landed:
            return FallEvent.GROUNDED

        self.position_y += self.speed
        if self._emit:
            self._emit(PositionUpdated(y=self.position_y))

        # Steps are coarse, so the threshold is widened by the tolerance.
        if self.position_y >= self.floor_y - self.tolerance:
            self._landed = True
            return FallEvent.FLOOR_REACHED
        return FallEvent.AIRBORNE

    def increase_speed(self, increment: float) -> float:
        """Raise the speed, clamped to [start_speed, max_speed]. Returns the new speed.

        A negative increment leaves the speed unchanged.
        """
        raised = max(self.speed, self.speed + increment, self.start_speed)
        self.speed = min(self.max_speed, raised)
        return self.speed

    @property
    def landed(self) -> bool:
        return self._landed

"""Per-line models: the sticky change latch and immutable snapshots."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Level

# Lines are laid out in rows of eight
LINES_PER_ROW = 8


def levels_differ(previous: Level, current: Level) -> bool:
    """
    Transition matrix for change detection.

    (HIGH/LOW, other HIGH/LOW) -> True
    (UNAVAILABLE, HIGH/LOW)    -> True
    (HIGH/LOW, UNAVAILABLE)    -> True
    (UNAVAILABLE, UNAVAILABLE) -> False
    Equal defined levels       -> False
    """
    return previous is not current


class ChangeLatch:
    """
    Sticky change flag.

    Once raised by a detected transition it stays raised until clear()
    is called. A poll can never lower it.
    """

    __slots__ = ("_raised",)

    def __init__(self, raised: bool = False) -> None:
        self._raised = raised

    @property
    def is_raised(self) -> bool:
        return self._raised

    def raise_if_differs(self, previous: Level, current: Level) -> bool:
        """
        Raise the latch if the two levels differ.

        Args:
            previous: Level seen at the previous poll tick
            current: Level read at this tick

        Returns:
            True if this call detected a difference
        """
        differs = levels_differ(previous, current)
        if differs:
            self._raised = True
        return differs

    def clear(self) -> None:
        self._raised = False

    def __bool__(self) -> bool:
        return self._raised

    def __repr__(self) -> str:
        return f"ChangeLatch(raised={self._raised})"


class LineSnapshot(BaseModel):
    """Read-only view of one line at snapshot time."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="GPIO line number")
    level: Level = Field(default=Level.UNAVAILABLE, description="Level read at the last poll")
    previous_level: Level = Field(default=Level.UNAVAILABLE, description="Level before the last poll")
    changed: bool = Field(default=False, description="Sticky change flag")
    blocked: bool = Field(default=False, description="Excluded from polling")
    configured: bool = Field(default=False, description="Line has a handle")

    @property
    def row(self) -> int:
        return self.index // LINES_PER_ROW

    @property
    def col(self) -> int:
        return self.index % LINES_PER_ROW


class BankSnapshot(BaseModel):
    """Read-only copy of the whole line bank, taken in one critical section."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[LineSnapshot, ...] = Field(description="All lines in index order")
    last_poll: float = Field(description="time.monotonic() of the last completed poll")
    taken_at: float = Field(description="time.monotonic() when the snapshot was taken")

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def row_count(self) -> int:
        return -(-self.line_count // LINES_PER_ROW)

    @property
    def elapsed(self) -> float:
        """Seconds between the last poll and the snapshot."""
        return max(0.0, self.taken_at - self.last_poll)

    @property
    def changed_count(self) -> int:
        return sum(1 for line in self.lines if line.changed)

    @property
    def blocked_count(self) -> int:
        return sum(1 for line in self.lines if line.blocked)

    @property
    def available_count(self) -> int:
        return sum(1 for line in self.lines if line.level.is_defined)

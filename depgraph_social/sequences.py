"""Sequences whose totals can be kept up to date incrementally."""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Sequence:
    """A sequence of numbers that grows by appending."""

    value: list = field(default_factory=list)

    def update(self, value: int) -> None:
        """Append a number."""
        self.value.append(value)


@dataclass
class EfficientSequence:
    """A sequence that remembers which numbers arrived since the last clean."""

    value: list = field(default_factory=list)
    dirty_index: int = 0

    def update(self, value: int) -> None:
        """Append a number."""
        self.value.append(value)

    def clean(self) -> None:
        """Mark every number seen so far as no longer new."""
        self.dirty_index = len(self.value)

    def iter_dirty(self) -> Iterator[int]:
        """The numbers appended since the last clean."""
        return iter(self.value[self.dirty_index:])


@dataclass
class SequenceTotals:
    """Totals of a plain sequence and of an efficient one.

    The plain total is recomputed from scratch every time; the efficient
    total only adds the numbers that are new since the last clean.
    """

    efficient_value: int = 0
    sequence_value: int = 0

    def update(self, sequence: Sequence, efficient: EfficientSequence) -> None:
        """Bring both totals up to date."""
        self.sequence_value = sum(sequence.value)
        self.efficient_value += sum(efficient.iter_dirty())
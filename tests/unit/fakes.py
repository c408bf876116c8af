"""Fake transform stages for testing the render pipeline."""

import threading

from todotree.models.node import NodeSnapshot, TransformResult


class ShiftTransform:
    """Drop or prepend characters and report the shift.

    A positive ``delta`` prepends that many ``"#"``; a negative one strips
    that many leading characters.
    """

    def __init__(self, delta: int) -> None:
        self.delta = delta
        self.seen: list[str] = []

    def transform(self, snapshot: NodeSnapshot) -> TransformResult:
        self.seen.append(snapshot.text)
        if self.delta >= 0:
            return TransformResult("#" * self.delta + snapshot.text, self.delta)
        return TransformResult(snapshot.text[-self.delta :], self.delta)


class UpperTransform:
    """Uppercase text without moving anything."""

    def transform(self, snapshot: NodeSnapshot) -> TransformResult:
        return TransformResult(snapshot.text.upper())


class LockedTransform:
    """Stage holding a lock, which cannot be deep-copied; provides ``fresh()``."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.fresh_calls = 0

    def fresh(self) -> "LockedTransform":
        self.fresh_calls += 1
        return LockedTransform()

    def transform(self, snapshot: NodeSnapshot) -> TransformResult:
        with self.lock:
            return TransformResult(snapshot.text + "!")

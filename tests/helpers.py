from __future__ import annotations

from collections.abc import Iterable

from termsnake.keys import Key


class FakeScreen:
    """Screen that records what was drawn into a cell dict."""

    def __init__(self) -> None:
        self.cells: dict[tuple[int, int], str] = {}
        self.clears = 0
        self.flushes = 0
        self.calls: list[str] = []

    def clear(self) -> None:
        self.cells.clear()
        self.clears += 1
        self.calls.append("clear")

    def put(self, x: int, y: int, text: str) -> None:
        for i, ch in enumerate(text):
            self.cells[(x + i, y)] = ch
        self.calls.append("put")

    def flush(self) -> None:
        self.flushes += 1
        self.calls.append("flush")

    def at(self, x: int, y: int) -> str:
        return self.cells.get((x, y), " ")

    def row(self, y: int) -> str:
        xs = [x for x, yy in self.cells if yy == y]
        if not xs:
            return ""
        return "".join(self.at(x, y) for x in range(max(xs) + 1)).rstrip()


class ScriptedKeyboard:
    """Replays a fixed key sequence, then reports quit."""

    def __init__(self, keys: Iterable[Key | None]) -> None:
        self.keys = list(keys)
        self.timeouts: list[int] = []

    def poll(self, timeout_ms: int) -> Key | None:
        self.timeouts.append(timeout_ms)
        if not self.keys:
            return Key.QUIT
        return self.keys.pop(0)


class StubRandom:
    """randint stand-in returning queued values, clamped into [a, b]."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self.values.pop(0) if self.values else a
        return min(max(value, a), b)

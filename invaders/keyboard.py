"""Per-frame keyboard state: edges and how long keys have been held."""

from __future__ import annotations

from collections.abc import Iterable

KEY_MAX = 255


class Keyboard:
    """Tracks which keys went down, came up, or stayed down between frames."""

    def __init__(self) -> None:
        self._current: set[int] = set()
        self._previous: set[int] = set()
        self._down: set[int] = set()
        self._up: set[int] = set()
        self._held: dict[int, int] = {}

    def update(self, pressed: Iterable[int]) -> None:
        """Take the key codes that are down this frame."""
        self._previous = self._current
        self._current = {k for k in pressed if 0 <= k < KEY_MAX}
        for key in self._current & self._previous:
            self._held[key] = self._held.get(key, 0) + 1
        changed = self._current ^ self._previous
        for key in changed:
            self._held.pop(key, None)
        self._down = changed & self._current
        self._up = changed & self._previous

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key < KEY_MAX:
            raise ValueError(f"key code out of range: {key}")

    def is_key_up(self, key: int) -> bool:
        """True on the frame the key was released."""
        self._check(key)
        return key in self._up

    def is_key_down(self, key: int) -> bool:
        """True on the frame the key was pressed."""
        self._check(key)
        return key in self._down

    def held_frames(self, key: int) -> int:
        """Number of frames the key has stayed down after the one it was pressed on."""
        self._check(key)
        return self._held.get(key, 0)
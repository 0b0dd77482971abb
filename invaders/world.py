"""Game objects and the world that owns, updates, draws and removes them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

WIN_WIDTH = 1024
WIN_HEIGHT = 768


class Canvas(Protocol):
    """Something game objects can draw on."""

    def draw_image(self, path: str, x1: float, y1: float, x2: float, y2: float, alpha: int) -> None:
        """Draw the image at path stretched into the box, with opacity 0-255."""
        ...

    def draw_frame(
        self,
        path: str,
        frame: int,
        columns: int,
        size: int,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
    ) -> None:
        """Draw one square cell of a sprite sheet stretched into the box."""
        ...


class GameObject(ABC):
    """Base for everything that lives in a World."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.alive = True

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the object."""

    def on_destroy(self) -> None:
        """Called once when the object is removed from the world."""


class World:
    """Holds live objects, objects waiting to join, and the frame time step."""

    def __init__(self) -> None:
        self.objects: list[GameObject] = []
        self.pending: list[GameObject] = []
        self.delta_time = 0.0

    def add(self, obj: GameObject) -> None:
        """Queue an object; it joins the world at the next flush."""
        self.pending.append(obj)

    def flush(self) -> None:
        """Move queued objects into the world."""
        self.objects.extend(self.pending)
        self.pending.clear()

    def update_all(self) -> None:
        """Update every object in the world, in insertion order."""
        for obj in list(self.objects):
            obj.update()

    def draw_all(self, canvas: Canvas) -> None:
        """Draw every object in the world, in insertion order."""
        for obj in list(self.objects):
            obj.draw(canvas)

    def sweep(self) -> None:
        """Remove dead objects and let each of them react to its removal."""
        dead = [obj for obj in self.objects if not obj.alive]
        self.objects = [obj for obj in self.objects if obj.alive]
        for obj in dead:
            obj.on_destroy()
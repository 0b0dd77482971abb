"""Projectiles: the player's bullets and the enemies' beams."""

from __future__ import annotations

from .geometry import Rect
from .world import WIN_HEIGHT, Canvas, GameObject, World

BULLET_IMAGE_WIDTH = 13
BULLET_IMAGE_HEIGHT = 33
BULLET_INIT_SPEED = 200.0
BULLET_IMAGE_PATH = "laserBlue03.png"

ENEMY_BEAM_IMAGE_WIDTH = 11
ENEMY_BEAM_IMAGE_HEIGHT = 21
ENEMY_BEAM_INIT_SPEED = 250.0
ENEMY_BEAM_IMAGE_PATH = "ebeams.png"

OPAQUE = 255


class Bullet(GameObject):
    """A reusable upward bullet; it is drawn only while fired."""

    def __init__(self, world: World, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(world)
        self.x = x
        self.y = y
        self.speed = BULLET_INIT_SPEED
        self.fired = False
        self.width = BULLET_IMAGE_WIDTH
        self.height = BULLET_IMAGE_HEIGHT
        world.add(self)

    def update(self) -> None:
        self.y -= self.speed * self.world.delta_time
        if self.y < 0:
            self.fired = False

    def draw(self, canvas: Canvas) -> None:
        if self.fired:
            canvas.draw_image(
                BULLET_IMAGE_PATH,
                self.x,
                self.y,
                self.x + self.width,
                self.y + self.height,
                OPAQUE,
            )

    def rect(self) -> Rect:
        """Return the bullet's bounding box."""
        return Rect(self.x, self.y, self.width, self.height)


class EnemyBeam(GameObject):
    """A downward beam that dies once it leaves the bottom of the window."""

    def __init__(self, world: World, x: float = -10.0, y: float = -10.0) -> None:
        super().__init__(world)
        self.x = x
        self.y = y
        self.speed = ENEMY_BEAM_INIT_SPEED
        self.fired = True
        self.width = ENEMY_BEAM_IMAGE_WIDTH
        self.height = ENEMY_BEAM_IMAGE_HEIGHT
        world.add(self)

    def update(self) -> None:
        self.y += self.speed * self.world.delta_time
        if self.y > WIN_HEIGHT:
            self.fired = False
            self.alive = False

    def draw(self, canvas: Canvas) -> None:
        if self.fired:
            canvas.draw_image(
                ENEMY_BEAM_IMAGE_PATH,
                self.x,
                self.y,
                self.x + self.width,
                self.y + self.height,
                OPAQUE,
            )

    def rect(self) -> Rect:
        """Return the beam's bounding box."""
        return Rect(self.x, self.y, self.width, self.height)
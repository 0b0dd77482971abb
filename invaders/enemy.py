"""Enemy ships that sway sideways and drop beams on a shared timer."""

from __future__ import annotations

import math
import weakref
from enum import IntEnum

from .bullet import OPAQUE, Bullet, EnemyBeam
from .effect import Effect
from .geometry import Point, Rect
from .world import Canvas, GameObject, World

ENEMY_IMAGE_WIDTH = 48
ENEMY_IMAGE_HEIGHT = 48
ENEMY_INIT_X = 100
ENEMY_INIT_Y = 100
ENEMY_INIT_SPEED = 100.0

SWAY_PERIOD = 10.0
SWAY_OMEGA = 2.0 * math.pi / SWAY_PERIOD
BEAM_INTERVAL = 3.0


class EnemyType(IntEnum):
    """The kinds of enemy, from weakest to strongest."""

    ZAKO = 0
    MID = 1
    KNIGHT = 2
    BOSS = 3


ENEMY_IMAGE_PATHS = {
    EnemyType.ZAKO: "tiny_ship10.png",
    EnemyType.MID: "tiny_ship18.png",
    EnemyType.KNIGHT: "tiny_ship16.png",
    EnemyType.BOSS: "tiny_ship9.png",
}

# All enemies of one world share a single beam countdown.
_beam_timers: weakref.WeakKeyDictionary[World, float] = weakref.WeakKeyDictionary()


class Enemy(GameObject):
    """An enemy ship swaying around its origin column."""

    def __init__(
        self,
        world: World,
        enemy_id: int = 0,
        enemy_type: EnemyType = EnemyType.ZAKO,
        register: bool = True,
    ) -> None:
        super().__init__(world)
        self.enemy_id = enemy_id
        self.enemy_type = EnemyType(enemy_type)
        self.x = float(ENEMY_INIT_X)
        self.y = float(ENEMY_INIT_Y)
        self.speed = ENEMY_INIT_SPEED
        self.x_move_max = 0.0
        self.x_origin = 0.0
        self.move_time = 0.0
        self.width = ENEMY_IMAGE_WIDTH
        self.height = ENEMY_IMAGE_HEIGHT
        self.bullets: list[Bullet] = []
        if register:
            world.add(self)

    @property
    def image_path(self) -> str:
        """The sprite used for this enemy's type."""
        return ENEMY_IMAGE_PATHS[self.enemy_type]

    def update(self) -> None:
        dt = self.world.delta_time
        self.move_time += dt
        self.x = self.x_origin + self.x_move_max / 2.0 * math.sin(SWAY_OMEGA * self.move_time)
        timer = _beam_timers.get(self.world, BEAM_INTERVAL)
        if timer < 0:
            EnemyBeam(
                self.world,
                self.x + ENEMY_IMAGE_WIDTH // 2,
                self.y + ENEMY_IMAGE_HEIGHT,
            )
            timer = BEAM_INTERVAL
        _beam_timers[self.world] = timer - dt

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(
            self.image_path,
            self.x,
            self.y,
            self.x + ENEMY_IMAGE_WIDTH,
            self.y + ENEMY_IMAGE_HEIGHT,
            OPAQUE,
        )

    def rect(self) -> Rect:
        """Return the enemy's bounding box."""
        return Rect(self.x, self.y, self.width, self.height)

    def active_bullet(self) -> Bullet | None:
        """Return the first bullet that is not in flight, if any."""
        return next((b for b in self.bullets if not b.fired), None)

    def on_destroy(self) -> None:
        Effect(self.world, Point(self.x, self.y))
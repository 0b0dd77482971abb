"""A short explosion animation played from a sprite sheet."""

from __future__ import annotations

from .geometry import Point
from .world import Canvas, GameObject, World

ANIME_TIME = 1.0
EFFECT_IMAGE_SIZE = 48
EFFECT_IMAGE_PATH = "explosion.png"
MAX_FRAME = 9
DIV_NUM = 3
FRAME_TIME = ANIME_TIME / MAX_FRAME


class Effect(GameObject):
    """An explosion that steps through its frames and dies after a second."""

    def __init__(self, world: World, pos: Point) -> None:
        super().__init__(world)
        self.pos = Point(pos.x, pos.y)
        self.anim_time = ANIME_TIME
        self.frame_timer = FRAME_TIME
        self.frame = 0
        world.add(self)

    def update(self) -> None:
        dt = self.world.delta_time
        self.anim_time -= dt
        if self.anim_time < 0:
            self.alive = False
        self.frame_timer -= dt
        if self.frame_timer < 0:
            self.frame += 1
            self.frame_timer = FRAME_TIME - self.frame_timer

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_frame(
            EFFECT_IMAGE_PATH,
            min(self.frame, MAX_FRAME - 1),
            DIV_NUM,
            EFFECT_IMAGE_SIZE,
            self.pos.x,
            self.pos.y,
            self.pos.x + EFFECT_IMAGE_SIZE,
            self.pos.y + EFFECT_IMAGE_SIZE,
        )
"""The player's ship: moves left and right and fires pooled bullets."""

from __future__ import annotations

from .bullet import OPAQUE, Bullet
from .effect import Effect
from .geometry import Point, Rect
from .keyboard import Keyboard
from .world import WIN_HEIGHT, WIN_WIDTH, Canvas, GameObject, World

KEY_SPACE = 0x39
KEY_LEFT = 0xCB
KEY_RIGHT = 0xCD

PLAYER_INIT_SPEED = 200.0
PLAYER_IMAGE_WIDTH = 48
PLAYER_IMAGE_HEIGHT = 48
PLAYER_BASE_MARGIN = 32
PLAYER_INIT_X = WIN_WIDTH / 2 - PLAYER_IMAGE_WIDTH / 2
PLAYER_INIT_Y = WIN_HEIGHT - PLAYER_IMAGE_HEIGHT - PLAYER_BASE_MARGIN
PLAYER_IMAGE_PATH = "tiny_ship5.png"
BULLET_IMAGE_MARGIN = 17
BULLET_INTERVAL = 0.5
PLAYER_BULLET_NUM = 5


class Player(GameObject):
    """The ship the keyboard steers."""

    def __init__(self, world: World, keyboard: Keyboard) -> None:
        super().__init__(world)
        self.keyboard = keyboard
        self.x = PLAYER_INIT_X
        self.y = float(PLAYER_INIT_Y)
        self.width = PLAYER_IMAGE_WIDTH
        self.height = PLAYER_IMAGE_HEIGHT
        self.speed = PLAYER_INIT_SPEED
        self.bullet_timer = 0.0
        self.bullets = [Bullet(world, -10, -10) for _ in range(PLAYER_BULLET_NUM)]
        world.add(self)

    def update(self) -> None:
        dt = self.world.delta_time
        next_x = self.x
        if self.keyboard.held_frames(KEY_LEFT):
            next_x = self.x - self.speed * dt
        if self.keyboard.held_frames(KEY_RIGHT):
            next_x = self.x + self.speed * dt
        if next_x >= 0 and next_x + PLAYER_IMAGE_WIDTH <= WIN_WIDTH:
            self.x = next_x

        if self.bullet_timer > 0.0:
            self.bullet_timer -= dt
        if self.keyboard.is_key_down(KEY_SPACE) and self.bullet_timer <= 0.0:
            self.shoot()
            self.bullet_timer = BULLET_INTERVAL

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(
            PLAYER_IMAGE_PATH,
            self.x,
            self.y,
            self.x + PLAYER_IMAGE_WIDTH,
            self.y + PLAYER_IMAGE_HEIGHT,
            OPAQUE,
        )

    def shoot(self) -> None:
        """Fire the first idle bullet from the ship's nose, if one is free."""
        bullet = self.active_bullet()
        if bullet is not None:
            bullet.x = self.x + BULLET_IMAGE_MARGIN
            bullet.y = self.y
            bullet.fired = True

    def rect(self) -> Rect:
        """Return the ship's bounding box."""
        return Rect(self.x, self.y, self.width, self.height)

    def active_bullet(self) -> Bullet | None:
        """Return the first bullet that is not in flight, if any."""
        return next((b for b in self.bullets if not b.fired), None)

    def on_destroy(self) -> None:
        Effect(self.world, Point(self.x, self.y))
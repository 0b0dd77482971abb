"""The playfield: lays out the enemy fleet and resolves hits."""

from __future__ import annotations

from .enemy import Enemy, EnemyType
from .geometry import intersects
from .keyboard import Keyboard
from .player import Player
from .world import WIN_HEIGHT, WIN_WIDTH, Canvas, GameObject, World

ENEMY_COL_SIZE = 10
ENEMY_ROW_SIZE = 7
ENEMY_NUM = ENEMY_COL_SIZE * ENEMY_ROW_SIZE
ENEMY_ALIGN_X = 55.0
ENEMY_ALIGN_Y = 50.0
ENEMY_LEFT_MARGIN = int((WIN_WIDTH - ENEMY_ALIGN_X * ENEMY_COL_SIZE) / 2)
ENEMY_TOP_MARGIN = 75
ENEMY_ROW_TYPES = (
    EnemyType.BOSS,
    EnemyType.KNIGHT,
    EnemyType.MID,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
    EnemyType.ZAKO,
)
BACKGROUND_IMAGE_PATH = "bg.png"
BACKGROUND_ALPHA = 200


class Stage(GameObject):
    """Owns the player and the enemy grid and checks collisions each frame."""

    def __init__(self, world: World, keyboard: Keyboard) -> None:
        super().__init__(world)
        world.add(self)
        self.player = Player(world, keyboard)
        self.beam_source = Enemy(world, register=False)
        self.players = [self.player]
        self.enemies: list[Enemy] = []
        for i in range(ENEMY_NUM):
            row, col = divmod(i, ENEMY_COL_SIZE)
            enemy = Enemy(world, i, ENEMY_ROW_TYPES[row])
            enemy.x_move_max = float(ENEMY_LEFT_MARGIN)
            enemy.x = col * ENEMY_ALIGN_X + ENEMY_LEFT_MARGIN
            enemy.y = row * ENEMY_ALIGN_Y + ENEMY_TOP_MARGIN
            enemy.x_origin = enemy.x
            self.enemies.append(enemy)

    def update(self) -> None:
        for enemy in self.enemies:
            for bullet in self.player.bullets:
                if bullet.fired and enemy.alive and intersects(enemy.rect(), bullet.rect()):
                    bullet.fired = False
                    enemy.alive = False
        self.player_vs_enemy_beams()

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_image(BACKGROUND_IMAGE_PATH, 0, 0, WIN_WIDTH, WIN_HEIGHT, BACKGROUND_ALPHA)

    def player_vs_enemy_beams(self) -> None:
        """Kill any player hit by a bullet in flight from the beam source."""
        for player in self.players:
            for bullet in self.beam_source.bullets:
                if bullet.fired and player.alive and intersects(player.rect(), bullet.rect()):
                    bullet.fired = False
                    player.alive = False
import pytest

from invaders.bullet import Bullet, EnemyBeam
from invaders.effect import Effect
from invaders.enemy import (
    ENEMY_IMAGE_HEIGHT,
    ENEMY_IMAGE_WIDTH,
    Enemy,
    EnemyType,
)
from invaders.geometry import Point, Rect
from invaders.world import World


class RecordingCanvas:
    def __init__(self):
        self.images = []
        self.frames = []

    def draw_image(self, path, x1, y1, x2, y2, alpha):
        self.images.append((path, x1, y1, x2, y2, alpha))

    def draw_frame(self, path, frame, columns, size, x1, y1, x2, y2):
        self.frames.append((path, frame, columns, size, x1, y1, x2, y2))


def beams(world):
    return [obj for obj in world.pending if isinstance(obj, EnemyBeam)]


def test_unregistered_enemy_is_not_queued():
    world = World()
    enemy = Enemy(world, register=False)
    assert world.pending == []
    assert (enemy.x, enemy.y) == (100, 100)


def test_registered_enemy_is_queued():
    world = World()
    enemy = Enemy(world, 3, EnemyType.MID)
    assert world.pending == [enemy]
    assert enemy.enemy_id == 3
    assert enemy.enemy_type is EnemyType.MID


@pytest.mark.parametrize(
    "enemy_type, path",
    [
        (EnemyType.ZAKO, "tiny_ship10.png"),
        (EnemyType.MID, "tiny_ship18.png"),
        (EnemyType.KNIGHT, "tiny_ship16.png"),
        (EnemyType.BOSS, "tiny_ship9.png"),
    ],
)
def test_draw_uses_image_of_type(enemy_type, path):
    enemy = Enemy(World(), 0, enemy_type)
    canvas = RecordingCanvas()
    enemy.draw(canvas)
    assert canvas.images == [
        (
            path,
            enemy.x,
            enemy.y,
            enemy.x + ENEMY_IMAGE_WIDTH,
            enemy.y + ENEMY_IMAGE_HEIGHT,
            255,
        )
    ]


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Enemy(World(), 0, 7)


def test_rect_matches_position_and_size():
    enemy = Enemy(World())
    enemy.x, enemy.y = 30.0, 40.0
    assert enemy.rect() == Rect(30.0, 40.0, 48, 48)


def test_quarter_period_reaches_right_extreme():
    world = World()
    enemy = Enemy(world)
    enemy.x_origin = 200.0
    enemy.x_move_max = 100.0
    world.delta_time = 2.5
    enemy.update()
    assert enemy.x == pytest.approx(enemy.x_origin + enemy.x_move_max / 2)


def test_sway_stays_within_range_and_keeps_height():
    world = World()
    enemy = Enemy(world)
    enemy.x_origin = 300.0
    enemy.x_move_max = 80.0
    enemy.y = 123.0
    world.delta_time = 0.37
    for _ in range(100):
        enemy.update()
        assert 260.0 - 1e-9 <= enemy.x <= 340.0 + 1e-9
        assert enemy.y == 123.0


def test_beam_fires_after_timer_runs_out():
    world = World()
    enemy = Enemy(world)
    world.delta_time = 1.0
    for _ in range(4):
        enemy.update()
    assert beams(world) == []
    enemy.update()
    fired = beams(world)
    assert len(fired) == 1
    assert fired[0].x == enemy.x + ENEMY_IMAGE_WIDTH // 2
    assert fired[0].y == enemy.y + ENEMY_IMAGE_HEIGHT


def test_beam_timer_is_shared_between_enemies_of_a_world():
    world = World()
    first = Enemy(world)
    second = Enemy(world)
    second.y = 300.0
    world.delta_time = 1.0
    for enemy in (first, second, first, second):
        enemy.update()
    assert beams(world) == []
    first.update()
    fired = beams(world)
    assert len(fired) == 1
    assert fired[0].y == first.y + ENEMY_IMAGE_HEIGHT


def test_beam_timer_is_separate_per_world():
    busy = World()
    busy_enemy = Enemy(busy)
    busy.delta_time = 1.0
    for _ in range(4):
        busy_enemy.update()
    quiet = World()
    quiet_enemy = Enemy(quiet)
    quiet.delta_time = 1.0
    quiet_enemy.update()
    assert beams(quiet) == []


def test_active_bullet():
    world = World()
    enemy = Enemy(world)
    assert enemy.active_bullet() is None
    busy = Bullet(world)
    busy.fired = True
    ready = Bullet(world)
    enemy.bullets.extend([busy, ready])
    assert enemy.active_bullet() is ready


def test_destroy_leaves_explosion_at_position():
    world = World()
    enemy = Enemy(world)
    enemy.x, enemy.y = 12.0, 34.0
    enemy.on_destroy()
    effect = world.pending[-1]
    assert isinstance(effect, Effect)
    assert effect.pos == Point(12.0, 34.0)
from invaders.effect import (
    ANIME_TIME,
    DIV_NUM,
    EFFECT_IMAGE_PATH,
    EFFECT_IMAGE_SIZE,
    FRAME_TIME,
    MAX_FRAME,
    Effect,
)
from invaders.geometry import Point
from invaders.world import World


class RecordingCanvas:
    def __init__(self):
        self.images = []
        self.frames = []

    def draw_image(self, path, x1, y1, x2, y2, alpha):
        self.images.append((path, x1, y1, x2, y2, alpha))

    def draw_frame(self, path, frame, columns, size, x1, y1, x2, y2):
        self.frames.append((path, frame, columns, size, x1, y1, x2, y2))


def test_effect_registers_and_copies_position():
    world = World()
    p = Point(10, 20)
    e = Effect(world, p)
    p.x = 99
    assert world.pending == [e]
    assert e.pos == Point(10, 20)
    assert e.frame == 0


def test_frame_advances_after_frame_time():
    world = World()
    world.delta_time = FRAME_TIME * 1.5
    e = Effect(world, Point(0, 0))
    e.update()
    assert e.frame == 1
    assert e.frame_timer > 0


def test_frame_holds_within_frame_time():
    world = World()
    world.delta_time = FRAME_TIME / 4
    e = Effect(world, Point(0, 0))
    e.update()
    assert e.frame == 0
    assert e.alive is True


def test_effect_dies_after_animation_time():
    world = World()
    world.delta_time = ANIME_TIME / 2 + 0.01
    e = Effect(world, Point(0, 0))
    e.update()
    assert e.alive is True
    e.update()
    assert e.alive is False


def test_draw_uses_sprite_sheet_cell():
    canvas = RecordingCanvas()
    e = Effect(World(), Point(5, 7))
    e.draw(canvas)
    assert canvas.frames == [
        (
            EFFECT_IMAGE_PATH,
            0,
            DIV_NUM,
            EFFECT_IMAGE_SIZE,
            5,
            7,
            5 + EFFECT_IMAGE_SIZE,
            7 + EFFECT_IMAGE_SIZE,
        )
    ]


def test_drawn_frame_never_leaves_the_sheet():
    world = World()
    world.delta_time = FRAME_TIME * 1.01
    e = Effect(world, Point(0, 0))
    canvas = RecordingCanvas()
    for _ in range(MAX_FRAME * 3):
        e.update()
        e.draw(canvas)
    assert all(0 <= call[1] < MAX_FRAME for call in canvas.frames)
    assert e.frame >= MAX_FRAME
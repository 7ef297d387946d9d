from brickout.colors import BLACK, BLUE, MAGENTA, RED, WHITE, Color
from brickout.sprite_effect import Chroma, Copy, Ghost, Substitution
from brickout.surface import Surface


def _target(color=BLACK):
    surface = Surface(2, 2)
    surface.fill(color)
    return surface


def test_chroma_skips_key_colour():
    target = _target()
    effect = Chroma(MAGENTA)
    effect(MAGENTA, 0, 0, target)
    effect(RED, 1, 1, target)
    assert target.get_pixel(0, 0) == BLACK
    assert target.get_pixel(1, 1) == RED


def test_substitution_paints_substitute():
    target = _target()
    effect = Substitution(MAGENTA, BLUE)
    effect(RED, 0, 1, target)
    effect(MAGENTA, 1, 0, target)
    assert target.get_pixel(0, 1) == BLUE
    assert target.get_pixel(1, 0) == BLACK


def test_substitution_default_key_is_magenta():
    target = _target()
    Substitution(sub=WHITE)(MAGENTA, 0, 0, target)
    assert target.get_pixel(0, 0) == BLACK


def test_copy_writes_even_key_colour():
    target = _target()
    Copy()(MAGENTA, 1, 1, target)
    assert target.get_pixel(1, 1) == MAGENTA


def test_ghost_blends_halfway():
    target = _target(Color.from_rgb(50, 150, 255))
    Ghost(MAGENTA)(Color.from_rgb(100, 50, 0), 0, 0, target)
    assert target.get_pixel(0, 0) == Color.from_rgb(75, 100, 127)


def test_ghost_over_same_colour_is_unchanged():
    target = _target(RED)
    Ghost(MAGENTA)(RED, 1, 0, target)
    assert target.get_pixel(1, 0) == RED


def test_ghost_is_symmetric_and_skips_key():
    a = Color.from_rgb(10, 200, 33)
    b = Color.from_rgb(90, 7, 140)
    first = _target(b)
    second = _target(a)
    Ghost(MAGENTA)(a, 0, 0, first)
    Ghost(MAGENTA)(b, 0, 0, second)
    assert first.get_pixel(0, 0) == second.get_pixel(0, 0)
    Ghost(MAGENTA)(MAGENTA, 1, 1, first)
    assert first.get_pixel(1, 1) == b
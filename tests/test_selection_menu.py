from brickout.interface_object import MouseEvent, MouseEventType
from brickout.selection_menu import GameState, SelectionMenu
from brickout.vec2 import Vec2


class FakeFont:
    char_width = 10
    char_height = 20

    def draw_text(self, text, pos, color, gfx):
        gfx.texts.append(text)


class FakeGfx:
    def __init__(self):
        self.texts = []
        self.disabled = []

    def draw_rect(self, rect, color):
        pass

    def draw_disabled(self, rect):
        self.disabled.append(rect)


def make_menu():
    return SelectionMenu(FakeFont(), Vec2(400, 200))


def click(menu, pos):
    menu.process_mouse(MouseEvent(MouseEventType.L_PRESS, pos, True))
    return menu.process_mouse(MouseEvent(MouseEventType.L_RELEASE, pos, False))


def test_options_in_order():
    menu = make_menu()
    assert [b.option for b in menu.buttons] == [
        GameState.SOLO,
        GameState.DUO,
        GameState.EDITOR_MODE,
        GameState.RANKING,
    ]


def test_click_solo_returns_solo():
    menu = make_menu()
    assert click(menu, menu.buttons[0].pos) is GameState.SOLO


def test_click_ranking_returns_ranking():
    menu = make_menu()
    assert click(menu, menu.buttons[3].pos) is GameState.RANKING


def test_duo_is_disabled():
    menu = make_menu()
    assert menu.buttons[1].disabled
    assert click(menu, menu.buttons[1].pos) is GameState.INVALID


def test_click_elsewhere_is_invalid():
    menu = make_menu()
    assert click(menu, Vec2(0, 0)) is GameState.INVALID


def test_buttons_stacked_and_aligned():
    menu = make_menu()
    rects = [b.rect for b in menu.buttons]
    assert all(b.pos.x == 400 for b in menu.buttons)
    assert len({r.width for r in rects}) == 1
    for upper, lower in zip(rects, rects[1:]):
        assert upper.bottom < lower.top


def test_draw_draws_every_label():
    menu = make_menu()
    gfx = FakeGfx()
    menu.draw(gfx)
    assert gfx.texts == ["Solo", "Duo", "Editor", "Ranking"]
    assert gfx.disabled == [menu.buttons[1].rect]
import pytest

from braille_turtle.config import CanvasConfig
from braille_turtle.turtle import Turtle


def test_defaults():
    t = Turtle()
    assert t.position == (0.0, 0.0)
    assert t.brush
    assert t.rotation == 0.0
    assert (t.canvas.width, t.canvas.height) == (0, 0)


def test_forward_draws_horizontal_line():
    t = Turtle(0, 0)
    t.forward(4.0)
    assert t.position == (4.0, 0.0)
    for x in range(5):
        assert t.canvas.get(x, 0)
    assert not t.canvas.get(5, 0)
    assert not t.canvas.get(0, 1)


def test_pen_up_moves_without_drawing():
    t = Turtle(0, 0)
    t.up()
    t.forward(10)
    assert t.position == (10.0, 0.0)
    assert t.canvas.cells == {}


def test_pen_toggle():
    t = Turtle()
    t.toggle()
    assert not t.brush
    t.toggle()
    assert t.brush
    t.up()
    t.down()
    assert t.brush


def test_right_turns_towards_positive_y():
    t = Turtle(0, 0)
    t.right(90)
    t.forward(4)
    assert t.x == pytest.approx(0.0, abs=1e-9)
    assert t.y == pytest.approx(4.0)
    for y in range(5):
        assert t.canvas.get(0, y)


def test_left_and_back():
    t = Turtle(5, 5)
    t.left(90)
    assert t.rotation == -90
    t.right(90)
    t.back(3)
    assert t.position == pytest.approx((2.0, 5.0))
    assert t.canvas.get(2, 5)
    assert t.canvas.get(5, 5)


def test_rotation_is_not_wrapped():
    t = Turtle()
    t.right(720)
    t.right(45)
    assert t.rotation == 765
    t.forward(2)
    assert t.x == pytest.approx(2 ** 0.5)
    assert t.y == pytest.approx(2 ** 0.5)


def test_move_rounds_halves_away_from_zero():
    t = Turtle(0, 0)
    t.move(2.5, 0)
    assert t.canvas.get(3, 0)
    assert t.position == (2.5, 0.0)


def test_move_rounds_before_clamping():
    t = Turtle(-0.4, -3.0)
    t.move(-0.6, 3.2)
    for y in range(4):
        assert t.canvas.get(0, y)
    assert t.position == (-0.6, 3.2)


def test_move_through_negative_space_clamps_endpoints():
    t = Turtle(-3.0, 0)
    t.move(2, 0)
    assert [t.canvas.get(x, 0) for x in range(4)] == [True, True, True, False]


def test_width_and_height_chain():
    t = Turtle().width(10).height(8)
    assert (t.canvas.width, t.canvas.height) == (5, 2)
    assert t.frame() == "     \n     "


def test_configure_from_config():
    t = Turtle().configure(CanvasConfig(pixel_width=6, pixel_height=12))
    assert (t.canvas.width, t.canvas.height) == (3, 3)


def test_frame_delegates_to_canvas():
    t = Turtle(1, 1).width(8).height(8)
    t.forward(5)
    assert t.frame() == t.canvas.frame()
    assert t.frame() == t.frame()

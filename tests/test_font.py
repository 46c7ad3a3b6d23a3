import pytest

from heistkit.color import Color
from heistkit.font import Font


class RecordingRenderer:
    def __init__(self, result=0):
        self.calls = []
        self.result = result

    def draw_text(self, x, y, font_face, size, color, text):
        self.calls.append((x, y, font_face, size, color, text))
        return self.result


def test_construction_loads_default_face():
    r = RecordingRenderer()
    f = Font(r)
    assert f.face == "arial.ttf"
    assert f.point_size == 18
    assert f.color == Color.black()
    assert r.calls == [(0, 0, "arial.ttf", 18, Color.black(), "")]


def test_load_reports_renderer_failure():
    r = RecordingRenderer(result=-1)
    f = Font(r)
    assert f.load("missing.ttf") is False
    r.result = 0
    assert f.load("other.ttf") is True
    assert f.face == "other.ttf"


def test_load_resets_size_and_color():
    f = Font(RecordingRenderer())
    f.set_size(40)
    f.set_color(Color.red())
    f.load("x.ttf")
    assert f.point_size == 18
    assert f.color == Color.black()


def test_set_color_from_components_default_alpha():
    f = Font(RecordingRenderer())
    f.set_color(10, 20, 30)
    assert f.color == Color(10, 20, 30, 100)
    f.set_color(1, 2, 3, 4)
    assert f.color == Color(1, 2, 3, 4)


def test_set_color_rejects_bad_arguments():
    f = Font(RecordingRenderer())
    with pytest.raises(TypeError):
        f.set_color(1, 2)


def test_draw_text_uses_current_settings():
    r = RecordingRenderer(result=55)
    f = Font(r)
    f.set_size(24)
    f.set_color(Color.blue())
    assert f.draw_text(3, 4, "hello") == 55
    assert r.calls[-1] == (3, 4, "arial.ttf", 24, Color.blue(), "hello")


def test_draw_text_override_does_not_change_state():
    r = RecordingRenderer()
    f = Font(r)
    f.draw_text(1, 2, "hi", Color.green(), 30)
    assert r.calls[-1] == (1, 2, "arial.ttf", 30, Color.green(), "hi")
    assert f.point_size == 18
    assert f.color == Color.black()


def test_draw_number_in_decimal():
    r = RecordingRenderer()
    f = Font(r)
    f.draw_number(0, 0, -42)
    assert r.calls[-1][5] == str(-42)
    f.draw_number(5, 6, 7, Color.red(), 12)
    assert r.calls[-1] == (5, 6, "arial.ttf", 12, Color.red(), "7")


def test_draw_char():
    r = RecordingRenderer()
    f = Font(r)
    f.draw_char(9, 8, "Q")
    assert r.calls[-1] == (9, 8, "arial.ttf", 18, Color.black(), "Q")
    with pytest.raises(ValueError):
        f.draw_char(0, 0, "ab")
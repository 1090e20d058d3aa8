from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def test_app_renders_initial_page():
    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert at.title[0].value == "8-Puzzle"
    assert any("Manual moves: 0" in c.value for c in at.caption)


def test_app_solves_after_manual_move():
    at = AppTest.from_file(APP, default_timeout=30).run()
    _button(at, "⬆️ Up").click().run()
    assert not at.exception
    _button(at, "Solve").click().run()
    assert not at.exception
    text = [m.value for m in at.markdown]
    assert "Solution length: **1** moves: Down" in text
    assert all("—" not in t for t in text)

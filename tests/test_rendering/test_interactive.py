"""Tests for the interactive editor — key and scroll handling."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.backend_bases import KeyEvent, MouseEvent

from shaper2d._constants import ZOOM_BASE
from shaper2d.editor import EditorState
from shaper2d.model import PolygonSpec
from shaper2d.rendering import interactive
from shaper2d.rendering.interactive import _apply_key, _apply_scroll, render_interactive


class TestApplyKey:
    def test_valid_edit_needs_shape(self):
        state = EditorState()
        assert _apply_key("1", state) == "shape"
        assert state.polygon == PolygonSpec(5, 21)

    def test_invalid_edit_needs_text_only(self):
        state = EditorState()
        assert _apply_key("/", state) == "text"
        assert state.polygon == PolygonSpec(5, 2)

    def test_backspace(self):
        state = EditorState()
        assert _apply_key("backspace", state) == "text"
        assert state.buffer == "5/"

    @pytest.mark.parametrize("key", [None, "q", "left", "ctrl+s"])
    def test_other_keys_ignored(self, key):
        state = EditorState()
        assert _apply_key(key, state) == "none"
        assert state.buffer == "5/2"


class TestApplyScroll:
    def test_scroll_up(self):
        state = EditorState(scale=100.0)
        assert _apply_scroll(1, state) == "shape"
        assert state.scale == pytest.approx(100.0 * ZOOM_BASE)

    def test_scroll_down(self):
        state = EditorState(scale=100.0)
        assert _apply_scroll(-2, state) == "shape"
        assert state.scale == pytest.approx(100.0 / ZOOM_BASE**2)

    def test_zero_step_no_redraw(self):
        state = EditorState(scale=100.0)
        assert _apply_scroll(0, state) == "none"
        assert state.scale == 100.0


def _run_session(monkeypatch, keys=(), steps=(), **kwargs):
    """Run render_interactive, feeding events instead of showing a window."""
    session = {}

    def fake_show():
        fig = plt.gcf()
        canvas = fig.canvas
        for key in keys:
            canvas.callbacks.process(
                "key_press_event", KeyEvent("key_press_event", canvas, key),
            )
        for step in steps:
            canvas.callbacks.process(
                "scroll_event",
                MouseEvent("scroll_event", canvas, 0, 0, step=step),
            )
        session["fig"] = fig

    monkeypatch.setattr(interactive.plt, "show", fake_show)
    state = render_interactive(**kwargs)
    fig = session["fig"]
    plt.close(fig)
    return state, fig.axes[0]


class TestRenderInteractive:
    def test_initial_state(self, monkeypatch):
        state, ax = _run_session(monkeypatch)
        assert state.polygon == PolygonSpec(5, 2)
        assert state.scale == 100.0
        assert ax.texts[0].get_text() == "\n{5/2}"
        assert len(ax.collections[1].get_offsets()) == 5

    def test_starting_polygon_and_scale(self, monkeypatch):
        state, ax = _run_session(monkeypatch, polygon="7/3", scale=50.0)
        assert state.polygon == PolygonSpec(7, 3)
        np.testing.assert_allclose(ax.collections[1].get_offsets()[0], [50.0, 0.0])

    def test_typing_replaces_shape(self, monkeypatch):
        keys = ["backspace", "backspace", "backspace", "8", "/", "3"]
        state, ax = _run_session(monkeypatch, keys=keys)
        assert state.polygon == PolygonSpec(8, 3)
        # Exactly one shape on screen: one edge and one vertex collection.
        assert len(ax.collections) == 2
        assert len(ax.collections[1].get_offsets()) == 8
        assert ax.texts[0].get_text() == "\n{8/3}"

    def test_invalid_notation_shows_caret_and_keeps_shape(self, monkeypatch):
        state, ax = _run_session(monkeypatch, keys=["/"])
        assert state.polygon == PolygonSpec(5, 2)
        assert ax.texts[0].get_text() == "    v\n{5/2/}"
        assert len(ax.collections[1].get_offsets()) == 5

    def test_scroll_zooms(self, monkeypatch):
        state, ax = _run_session(monkeypatch, steps=[1, 1])
        assert state.scale == pytest.approx(100.0 * ZOOM_BASE**2)
        assert len(ax.collections) == 2
        assert ax.collections[1].get_offsets()[0][0] == pytest.approx(
            100.0 * ZOOM_BASE**2
        )

    def test_unrelated_keys_ignored(self, monkeypatch):
        state, ax = _run_session(monkeypatch, keys=["q", "s", "l"])
        assert state.buffer == "5/2"

    def test_style_kwargs(self, monkeypatch):
        state, ax = _run_session(monkeypatch, initial_polygon="6")
        assert state.polygon == PolygonSpec(6)

    def test_notation_hidden(self, monkeypatch):
        state, ax = _run_session(monkeypatch, show_notation=False)
        assert not ax.texts[0].get_visible()

    def test_failed_regeneration_keeps_previous_shape(self, monkeypatch):
        seen = {}

        def failing_shape(self):
            raise MemoryError("shape too large")

        def fake_show():
            fig = plt.gcf()
            canvas = fig.canvas
            ax = fig.axes[0]
            with monkeypatch.context() as m:
                m.setattr(EditorState, "shape", failing_shape)
                with pytest.raises(MemoryError):
                    canvas.callbacks.process(
                        "key_press_event", KeyEvent("key_press_event", canvas, "1"),
                    )
            seen["after_failure"] = [len(c.get_offsets()) for c in ax.collections[1:]]
            seen["n_collections"] = len(ax.collections)
            canvas.callbacks.process(
                "key_press_event", KeyEvent("key_press_event", canvas, "backspace"),
            )
            seen["fig"] = fig

        monkeypatch.setattr(interactive.plt, "show", fake_show)
        state = render_interactive()
        ax = seen["fig"].axes[0]
        plt.close(seen["fig"])
        assert seen["n_collections"] == 2
        assert seen["after_failure"] == [5]
        assert state.polygon == PolygonSpec(5, 2)
        assert len(ax.collections) == 2
        assert len(ax.collections[1].get_offsets()) == 5

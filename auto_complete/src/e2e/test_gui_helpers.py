# GUI widgets need a display; only the pure helpers are checked here.
import pytest

ctk = pytest.importorskip("customtkinter")

from termcomplete.models import Term


def _app_module():
    try:
        import app
    except Exception as exc:  # tkinter present but unusable in this environment
        pytest.skip(f"GUI module unavailable: {exc!r}")
    return app


def test_shorten_path():
    app = _app_module()
    assert app.shorten_path("/short/path.txt") == "/short/path.txt"
    long = "/very/" + "x" * 100 + "/terms.txt"
    out = app.shorten_path(long, max_chars=40)
    assert "..." in out and len(out) <= 40


def test_format_row():
    app = _app_module()
    row = app.format_row(1, Term("Toronto, Ontario, Canada", 5213000))
    assert row.startswith("  1.")
    assert row.endswith("Toronto, Ontario, Canada")
    assert "5.213e+06" in row


class _FakeEngine:
    def __init__(self, exc=None):
        self._exc = exc
        self.size = 3

    def load(self, path):
        if self._exc is not None:
            raise self._exc


class _FakeWindow:
    """Stands in for the Tk window: after() queues callbacks, handlers record calls."""

    def __init__(self, engine):
        self._engine = engine
        self.queued = []
        self.errors = []
        self.loaded = []

    def after(self, _ms, fn):
        self.queued.append(fn)

    def _on_load_error(self, exc):
        self.errors.append(exc)

    def _on_load_ok(self, n):
        self.loaded.append(n)


def test_load_error_reaches_handler_after_worker_returns():
    app = _app_module()
    win = _FakeWindow(_FakeEngine(FileNotFoundError("/nope")))
    app.AutocompleteApp._load_worker(win, "/nope")
    assert len(win.queued) == 1
    # the callback runs later on the Tk loop, after the except block is gone
    win.queued[0]()
    assert len(win.errors) == 1 and isinstance(win.errors[0], FileNotFoundError)
    assert win.loaded == []


def test_load_success_reports_term_count():
    app = _app_module()
    win = _FakeWindow(_FakeEngine())
    app.AutocompleteApp._load_worker(win, "terms.txt")
    win.queued[0]()
    assert win.loaded == [3] and win.errors == []

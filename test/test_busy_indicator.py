import threading

from bizdash.ui.app import App


class FakeVar:
    def __init__(self):
        self.value = ""

    def set(self, value):
        self.value = value

    def get(self):
        return self.value


def _app():
    # Only the busy-counter state is needed; no Tk window is created.
    app = object.__new__(App)
    app._busy_lock = threading.Lock()
    app._busy_count = 0
    app.busy_var = FakeVar()
    app.scheduled = []
    app._ui = app.scheduled.append
    return app


def test_busy_label_is_cleared_when_callbacks_run_out_of_order():
    app = _app()

    app.set_busy(True)   # call A starts
    app.set_busy(True)   # call B starts
    app.set_busy(False)  # call A ends
    app.set_busy(False)  # call B ends

    # Run the scheduled label updates in an interleaved order.
    first, second, third, fourth = app.scheduled
    for callback in (first, third, fourth, second):
        callback()

    assert app._busy_count == 0
    assert app.busy_var.get() == ""


def test_busy_label_shows_while_any_call_is_in_flight():
    app = _app()

    app.set_busy(True)
    app.set_busy(True)
    app.set_busy(False)
    for callback in app.scheduled:
        callback()

    assert app.busy_var.get() == "⏳ Loading..."


def test_busy_count_never_goes_negative():
    app = _app()

    app.set_busy(False)
    app.scheduled[-1]()

    assert app._busy_count == 0
    assert app.busy_var.get() == ""

"""Tick source backed by Textual's message-loop timers."""

from focus_forest.app.ticker import TICK_INTERVAL_S, TickCallback, TickToken


class TextualTicker:
    """Runs ticks on the app's own loop via App.set_interval.

    Cancelling the token stops the interval; a tick already dequeued still
    reaches the callback and is rejected there by token check.
    """

    def __init__(self, app, interval: float = TICK_INTERVAL_S):
        self._app = app
        self._interval = interval

    def start(self, callback: TickCallback) -> TickToken:
        token = TickToken()
        timer = self._app.set_interval(self._interval, lambda: callback(token), name="focus-tick")
        token._on_cancel = timer.stop
        return token

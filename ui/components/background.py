import queue
import threading

from utils.constants import POLL_INTERVAL_MS


def run_in_background(widget, func, on_success, on_error):
    """Run func on a worker thread and deliver its outcome on the Tk thread.

    Tk widgets must only be touched from the main loop, so the worker drops
    its result into a queue that widget.after() polls. If the widget is gone
    by the time the result arrives, the result is dropped.
    """
    results: queue.Queue = queue.Queue(maxsize=1)

    def worker():
        try:
            results.put((True, func()))
        except Exception as exc:
            results.put((False, exc))

    def poll():
        if not widget.winfo_exists():
            return
        try:
            ok, value = results.get_nowait()
        except queue.Empty:
            widget.after(POLL_INTERVAL_MS, poll)
            return
        if ok:
            on_success(value)
        else:
            on_error(value)

    threading.Thread(target=worker, daemon=True).start()
    widget.after(POLL_INTERVAL_MS, poll)

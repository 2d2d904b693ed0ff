import sys
import threading


class ResultSink:
    """
    Console + append-only file shared by all workers.

    Each record() is one locked open/write/flush/close cycle so nothing is
    buffered in memory and finished lines survive an interrupted run.
    """

    def __init__(self, output_path, console=None):
        self.output_path = output_path
        self.console = console if console is not None else sys.stdout
        self._lock = threading.Lock()

    def record(self, text):
        with self._lock:
            print(text, file=self.console, flush=True)
            try:
                with open(self.output_path, "a", encoding="utf-8") as f:
                    f.write(text + "\n")
                    f.flush()
            except OSError as e:
                print("Error writing to file:", e, file=self.console, flush=True)

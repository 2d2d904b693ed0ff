"""
Bounded worker pool feeding targets through the probe engine.

The queue holds at most `workers` pending targets, so reading the input
blocks once every worker is busy and the queue is full. Memory stays
proportional to the worker count, not the number of targets.
"""

import logging
import queue
import threading

from specter_xml.config import DEFAULT_WORKERS
from specter_xml.engine import ProbeEngine
from specter_xml.sink import ResultSink

logger = logging.getLogger(__name__)

# Pushed once per worker by close()
_STOP = object()


class CompletionBarrier:
    """Outstanding-work counter; wait() blocks until it drops back to zero."""

    def __init__(self):
        self._pending = 0
        self._cond = threading.Condition()

    @property
    def pending(self):
        with self._cond:
            return self._pending

    def add(self, n=1):
        with self._cond:
            self._pending += n

    def done(self):
        with self._cond:
            if self._pending <= 0:
                raise ValueError("done() called more times than add()")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()

    def wait(self, timeout=None):
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)


class Dispatcher:
    def __init__(self, engine, sink, workers=DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.engine = engine
        self.sink = sink
        self.workers = workers
        self.queue = queue.Queue(maxsize=workers)
        self.barrier = CompletionBarrier()
        self._threads = []
        self._closed = False

    def start(self):
        if self._threads:
            raise RuntimeError("dispatcher already started")
        for i in range(self.workers):
            t = threading.Thread(target=self._worker, name=f"specter-worker-{i}", daemon=True)
            t.start()
            self._threads.append(t)
        logger.debug("Started %d workers", self.workers)

    def _worker(self):
        while True:
            url = self.queue.get()
            if url is _STOP:
                break
            try:
                line = self.engine.evaluate(url)
                if line is not None:
                    self.sink.record(line)
            except Exception:
                logger.exception("Unexpected error while probing %r", url)
            finally:
                self.barrier.done()
        logger.debug("%s exiting", threading.current_thread().name)

    def submit(self, url):
        """Queue one target, blocking while the queue is full."""
        if self._closed:
            raise RuntimeError("dispatcher is closed")
        self.barrier.add()
        self.queue.put(url)

    def close(self):
        """Tell workers to exit once everything already queued is processed."""
        if self._closed:
            return
        self._closed = True
        for _ in self._threads:
            self.queue.put(_STOP)

    def wait(self):
        """Block until every submitted target is done. Call after close()."""
        self.barrier.wait()
        for t in self._threads:
            t.join()

    def run(self, urls):
        """Probe every url and return how many non-blank targets were seen."""
        self.start()
        targets = 0
        for url in urls:
            self.submit(url)
            if url.strip():
                targets += 1
        self.close()
        self.wait()
        logger.debug("All %d targets processed", targets)
        return targets


def run(url_stream, workers, silent, output_path, prober=None):
    """Probe every line of url_stream with a pool of `workers` threads."""
    engine = ProbeEngine(prober=prober, silent=silent)
    sink = ResultSink(output_path)
    return Dispatcher(engine, sink, workers=workers).run(url_stream)

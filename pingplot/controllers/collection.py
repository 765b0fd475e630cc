import threading

from loguru import logger

from .. import constants
from ..ping import ProbeFailed, probe


class SampleSource:
    """Pings one host back to back and appends each latency to a shared series.

    The probe runs outside `lock`; the lock is only held for the append.
    Failed probes are dropped without a trace and the next one starts at once.
    """

    def __init__(self, series, lock, host=constants.DEFAULT_HOST, ping_path=constants.PING_PATH, probe_fn=probe):
        self.series = series
        self.lock = lock
        self.host = host
        self.ping_path = ping_path
        self.probe_fn = probe_fn

    def sample_once(self) -> bool:
        try:
            latency = self.probe_fn(self.host, self.ping_path)
        except ProbeFailed:
            return False
        with self.lock:
            self.series.append(latency)
        return True

    def run(self):
        while True:
            self.sample_once()

    def start(self) -> threading.Thread:
        # Never joined or signalled; dies with the process.
        thread = threading.Thread(target=self.run, name="ping-sampler", daemon=True)
        thread.start()
        logger.info(f"Sampling {self.host} via {self.ping_path}")
        return thread

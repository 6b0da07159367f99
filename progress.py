import sys
import threading
from typing import Optional, TextIO

BAR_LENGTH = 50
ANIMATION = "|/-\\"
INTERVAL = 1.0 / 8


class ProgressBar:
    """Console progress bar redrawn from a background thread.

    report() only stores a float, so the producer never waits on drawing.
    Nothing is drawn when the stream is not a terminal.
    """

    def __init__(self, prefix: str = "", stream: Optional[TextIO] = None):
        self.prefix = prefix
        self._stream = stream or sys.stderr
        self._progress = 0.0
        self._text = ""
        self._tick = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = None

    @property
    def progress(self) -> float:
        return self._progress

    def report(self, value: float) -> None:
        """Record progress in [0, 1]; values outside are clamped."""
        self._progress = max(0.0, min(1.0, value))

    def render(self) -> str:
        """Return the bar text for the current progress and advance the spinner."""
        progress = self._progress
        filled = int(progress * BAR_LENGTH)
        spinner = ANIMATION[self._tick % len(ANIMATION)]
        self._tick += 1
        return "{}[{}{}] {:>4}% {}".format(
            self.prefix,
            "#" * filled,
            "-" * (BAR_LENGTH - filled),
            int(progress * 100),
            spinner,
        )

    def _draw(self, text: str) -> None:
        # Rewrite only the part of the line that changed.
        common = 0
        limit = min(len(self._text), len(text))
        while common < limit and text[common] == self._text[common]:
            common += 1
        out = "\b" * (len(self._text) - common) + text[common:]
        overlap = len(self._text) - len(text)
        if overlap > 0:
            out += " " * overlap + "\b" * overlap
        self._stream.write(out)
        self._stream.flush()
        self._text = text

    def _worker(self) -> None:
        while not self._stop.wait(INTERVAL):
            with self._lock:
                if self._stop.is_set():
                    return
                self._draw(self.render())

    def start(self) -> "ProgressBar":
        isatty = getattr(self._stream, "isatty", None)
        if isatty and isatty() and self._thread is None:
            self._thread = threading.Thread(target=self._worker, daemon=True)
            self._thread.start()
        return self

    def close(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        with self._lock:
            if self._text:
                self._draw("")

    def __enter__(self) -> "ProgressBar":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

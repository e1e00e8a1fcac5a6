"""
Frame Statistics - FPS tracking with process resource sampling.

Nothing is drawn on screen; once per second the current frame rate, CPU
usage and resident memory of the screensaver process go to the debug log.
"""

import logging
import os
import time
from typing import Callable, Optional

import psutil

logger = logging.getLogger(__name__)


def _format_bytes(n: float) -> str:
    """Format bytes as human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if abs(n) < 1024.0:
            return f"{n:.0f}{unit}"
        n /= 1024.0
    return f"{n:.0f}TB"


class FrameStats:
    """Counts frames and reports the rate roughly once per second."""

    REPORT_INTERVAL = 1.0

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 process: Optional[psutil.Process] = None):
        self._clock = clock
        self._process = process if process is not None else psutil.Process(os.getpid())
        self._frame_count = 0
        self._last_report = clock()
        self.fps = 0.0
        self.total_frames = 0
        # Prime cpu_percent so the first report covers the first interval
        self._process.cpu_percent(interval=None)

    def record_frame(self) -> bool:
        """Count one frame. Returns True when a new FPS figure was computed."""
        self._frame_count += 1
        self.total_frames += 1

        now = self._clock()
        elapsed = now - self._last_report
        if elapsed < self.REPORT_INTERVAL:
            return False

        self.fps = self._frame_count / elapsed
        self._frame_count = 0
        self._last_report = now
        self._log_resources()
        return True

    def _log_resources(self):
        try:
            cpu = self._process.cpu_percent(interval=None)
            rss = self._process.memory_info().rss
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.debug(f"Resource sampling unavailable: {e}")
            logger.debug(f"fps={self.fps:.1f}")
            return
        logger.debug(f"fps={self.fps:.1f} cpu={cpu:.1f}% rss={_format_bytes(rss)}")

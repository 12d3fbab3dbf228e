"""
streamer.py - Threaded Video Streamer
=====================================
Reads frames from video source in a separate thread so the sampling
loop always gets the newest frame without blocking on I/O.
"""

import logging
import threading
import time

import cv2

logger = logging.getLogger(__name__)


class VideoStreamer:
    """
    Reads frames from a video source or camera using a separate thread.
    Only the most recent frame is kept; older frames are dropped.
    """

    def __init__(self, source):
        self.source = source
        self.cap = cv2.VideoCapture(source)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open video source: {source}")

        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        self.fps = self.cap.get(cv2.CAP_PROP_FPS) or 30.0

        self._frame = None
        self._frame_id = 0
        self._read_id = 0
        self._lock = threading.Lock()
        self._new_frame = threading.Condition(self._lock)
        self.stopped = False
        self.thread = None

    def start(self):
        """Start the background frame reading thread."""
        if self.thread is not None:
            return self

        self.stopped = False
        self.thread = threading.Thread(target=self._update, name="StreamerThread", daemon=True)
        self.thread.start()
        logger.info(f"[VideoStreamer] Started {self.width}x{self.height} @ {self.fps:.1f} FPS")
        return self

    def _update(self):
        """Internal loop to read frames from source."""
        # Files are paced at their own frame rate; cameras block on read()
        delay = 1.0 / self.fps if isinstance(self.source, str) else 0.0
        while not self.stopped:
            ret, frame = self.cap.read()
            if not ret:
                break
            with self._new_frame:
                self._frame = frame
                self._frame_id += 1
                self._new_frame.notify_all()
            if delay:
                time.sleep(delay)

        with self._new_frame:
            self.stopped = True
            self._new_frame.notify_all()
        self.cap.release()

    def read(self, timeout: float = 1.0):
        """Return the newest unread frame, or None if none arrives in time."""
        with self._new_frame:
            if self._frame_id == self._read_id and not self.stopped:
                self._new_frame.wait(timeout)
            if self._frame_id == self._read_id:
                return None
            self._read_id = self._frame_id
            return self._frame

    def more(self):
        """Check if there is an unread frame or if still running."""
        with self._lock:
            return self._frame_id != self._read_id or not self.stopped

    def stop(self):
        """Stop the background thread and release resources."""
        self.stopped = True
        if self.thread:
            self.thread.join(timeout=2.0)
        if self.cap.isOpened():
            self.cap.release()

"""
landmarks.py - Named Pose Landmarks
===================================
Per-frame landmark container and the pose source interface.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from ..exercises.base import ORIGIN, Point

logger = logging.getLogger(__name__)


# MoveNet keypoint order
KEYPOINT_NAMES = (
    "nose", "left_eye", "right_eye", "left_ear", "right_ear",
    "left_shoulder", "right_shoulder", "left_elbow", "right_elbow",
    "left_wrist", "right_wrist", "left_hip", "right_hip",
    "left_knee", "right_knee", "left_ankle", "right_ankle",
)


class LandmarkSet(Mapping):
    """
    Read-only mapping of joint name -> normalized Point for one frame.

    Joints the pose model did not report resolve to the origin through
    point(); plain indexing still raises KeyError.
    """

    def __init__(self, points: Dict[str, Point], scores: Optional[Dict[str, float]] = None):
        self._points = {name: Point(float(p[0]), float(p[1])) for name, p in points.items()}
        self.scores = dict(scores) if scores else {}

    def __getitem__(self, name: str) -> Point:
        return self._points[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self):
        return f"LandmarkSet({len(self._points)} points)"

    def point(self, name: str) -> Point:
        """Get a joint position, or the origin if it is missing."""
        p = self._points.get(name)
        if p is None:
            logger.debug("[LandmarkSet] Missing '%s', using origin", name)
            return ORIGIN
        return p

    def points(self, names: Sequence[str]) -> Tuple[Point, ...]:
        return tuple(self.point(name) for name in names)

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]],
                    names: Sequence[str] = KEYPOINT_NAMES) -> "LandmarkSet":
        """
        Build from an ordered sequence of (x, y) normalized coordinates.

        Extra points beyond the name list are ignored; short input leaves the
        remaining names missing.
        """
        return cls({name: (p[0], p[1]) for name, p in zip(names, points)})

    @classmethod
    def from_pixels(cls, points: Sequence[Sequence[float]], width: float, height: float,
                    names: Sequence[str] = KEYPOINT_NAMES) -> "LandmarkSet":
        """
        Build from pixel coordinates, normalizing by frame size.

        Args:
            points: Ordered (x, y) pixel positions
            width, height: Frame dimensions in pixels
            names: Joint names in the same order as points
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid frame size: {width}x{height}")
        return cls({name: (p[0] / width, p[1] / height) for name, p in zip(names, points)})

    @classmethod
    def from_movenet(cls, keypoints: np.ndarray,
                     names: Sequence[str] = KEYPOINT_NAMES) -> "LandmarkSet":
        """
        Build from a MoveNet keypoint array.

        Args:
            keypoints: Array (17, 3) with [y, x, score] rows, normalized

        Returns:
            LandmarkSet with scores kept for rendering
        """
        keypoints = np.asarray(keypoints, dtype=float).reshape((-1, 3))
        points = {}
        scores = {}
        for name, (y, x, score) in zip(names, keypoints):
            points[name] = (x, y)
            scores[name] = float(score)
        return cls(points, scores)


class LandmarkSource(ABC):
    """Base class for pose models that turn a frame into landmarks."""

    @abstractmethod
    def estimate(self, frame: np.ndarray) -> Optional[LandmarkSet]:
        """
        Estimate pose landmarks in the given frame.

        Args:
            frame: BGR image from OpenCV

        Returns:
            LandmarkSet for the detected person, or None if nobody was found
        """
        pass

"""
base.py - Base types and geometry for repetition counting
=========================================================
Contains the point type, motion states, angle math and per-exercise
session state shared by the evaluator.
"""

import enum
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """A 2-D landmark in normalized frame coordinates."""
    x: float
    y: float


# Substitute for any landmark the pose model did not report
ORIGIN = Point(0.0, 0.0)


class MotionState(enum.Enum):
    """Body position classified from a single joint angle."""
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class AngleCalculator:
    """Utility class for calculating angles from keypoints."""

    @staticmethod
    def calculate_angle(a: Point, b: Point, c: Point) -> float:
        """
        Calculate angle ABC (at point B) in degrees.

        Args:
            a, b, c: Points as (x, y) normalized coordinates

        Returns:
            Angle in degrees (0-180). Coincident or non-finite input gives 0.
        """
        a, b, c = np.array(a, dtype=float), np.array(b, dtype=float), np.array(c, dtype=float)
        radians = np.arctan2(c[1] - b[1], c[0] - b[0]) - np.arctan2(a[1] - b[1], a[0] - b[0])
        angle = np.abs(radians * 180.0 / np.pi)
        if not np.isfinite(angle):
            return 0.0
        if angle > 180:
            angle = 360 - angle
        return float(angle)


class EvaluationSession:
    """Represents the counting state for the exercise in progress."""

    def __init__(self):
        self.previous_state = MotionState.UNKNOWN
        self.transition_count = 0
        self.repetition_count = 0
        self.score = 0

    def reset(self):
        """Reset the session state."""
        self.previous_state = MotionState.UNKNOWN
        self.transition_count = 0
        self.repetition_count = 0
        self.score = 0

    def __repr__(self):
        return (f"EvaluationSession(previous_state={self.previous_state.name}, "
                f"transition_count={self.transition_count}, "
                f"repetition_count={self.repetition_count}, score={self.score})")

import math

import pytest

from repcoach.core.landmarks import LandmarkSet


def arm_landmarks(angle, elbow=(0.5, 0.5), length=0.2):
    """Left arm landmarks whose elbow angle is `angle` degrees."""
    ex, ey = elbow
    shoulder = (ex, ey - length)
    direction = math.radians(-90.0 + angle)
    wrist = (ex + length * math.cos(direction), ey + length * math.sin(direction))
    return LandmarkSet({
        "left_shoulder": shoulder,
        "left_elbow": elbow,
        "left_wrist": wrist,
    })


@pytest.fixture
def arm():
    return arm_landmarks

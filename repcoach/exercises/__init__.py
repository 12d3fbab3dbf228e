"""
Exercise Logic Module
=====================
Contains angle math, exercise profiles and repetition counting.
"""

from .base import ORIGIN, AngleCalculator, EvaluationSession, MotionState, Point
from .profiles import (
    DEFAULT_PROFILE_NAME,
    EXERCISE_PROFILES,
    ExerciseProfile,
    get_profile,
    load_profiles,
)
from .repetition import RepetitionStateMachine

__all__ = [
    'ORIGIN',
    'AngleCalculator',
    'EvaluationSession',
    'MotionState',
    'Point',
    'DEFAULT_PROFILE_NAME',
    'EXERCISE_PROFILES',
    'ExerciseProfile',
    'get_profile',
    'load_profiles',
    'RepetitionStateMachine'
]

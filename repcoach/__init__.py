"""
RepCoach - Pose-based Repetition Counter
========================================
Counts exercise repetitions and keeps score from per-frame pose landmarks.
"""

from .core import ExerciseEvaluator, EvaluationResult, LandmarkSet, LandmarkSource
from .exercises import AngleCalculator, ExerciseProfile, MotionState, RepetitionStateMachine
from .workout import Workout, build_exercise_plan

__version__ = "1.0.0"
__all__ = [
    "ExerciseEvaluator",
    "EvaluationResult",
    "LandmarkSet",
    "LandmarkSource",
    "AngleCalculator",
    "ExerciseProfile",
    "MotionState",
    "RepetitionStateMachine",
    "Workout",
    "build_exercise_plan",
]

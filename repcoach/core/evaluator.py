"""
evaluator.py - Exercise Evaluation
==================================
Combines landmark lookup, angle calculation and repetition counting
for the exercise in progress.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..exercises.base import AngleCalculator, EvaluationSession, MotionState
from ..exercises.profiles import ExerciseProfile, get_profile
from ..exercises.repetition import RepetitionStateMachine
from .landmarks import LandmarkSet

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Outcome of evaluating one frame."""
    exercise: str
    angle: float
    motion_state: MotionState
    repetition_count: int
    score: int
    repetition_completed: bool = False


class ExerciseEvaluator:
    """
    Evaluates frames for a single active exercise.

    Frames must be fed in order from one producer; the evaluator holds no
    lock. Switching exercise discards the current session.
    """

    def __init__(self, exercise: Optional[str] = None,
                 profiles: Optional[Dict[str, ExerciseProfile]] = None):
        """
        Initialize the evaluator.

        Args:
            exercise: Exercise identifier; unknown names use the default profile
            profiles: Profile table (built-in table if None)
        """
        self.profiles = profiles
        self.angle_calculator = AngleCalculator()
        self.state_machine = RepetitionStateMachine()
        self.exercise = exercise
        self._profile = get_profile(exercise, profiles)
        self.session = EvaluationSession()
        self.last_angle = 0.0

    @property
    def profile(self) -> ExerciseProfile:
        return self._profile

    @property
    def repetition_count(self) -> int:
        return self.session.repetition_count

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def motion_state(self) -> MotionState:
        return self.session.previous_state

    def evaluate(self, landmarks: LandmarkSet) -> EvaluationResult:
        """
        Evaluate one frame of landmarks.

        Args:
            landmarks: Landmarks for the current frame

        Returns:
            EvaluationResult with the updated count and score
        """
        p1, p2, p3 = landmarks.points(self._profile.keypoints)
        angle = self.angle_calculator.calculate_angle(p1, p2, p3)
        self.last_angle = angle

        rep_completed = self.state_machine.update(self.session, angle, self._profile)

        return EvaluationResult(
            exercise=self._profile.name if self.exercise is None else self.exercise,
            angle=angle,
            motion_state=self.state_machine.classify(angle, self._profile),
            repetition_count=self.session.repetition_count,
            score=self.session.score,
            repetition_completed=rep_completed,
        )

    def measure(self, landmarks: LandmarkSet) -> EvaluationResult:
        """Report the angle and state for a frame without counting it."""
        angle = self.angle_calculator.calculate_angle(
            *landmarks.points(self._profile.keypoints))

        return EvaluationResult(
            exercise=self._profile.name if self.exercise is None else self.exercise,
            angle=angle,
            motion_state=self.state_machine.classify(angle, self._profile),
            repetition_count=self.session.repetition_count,
            score=self.session.score,
        )

    def switch_exercise(self, exercise: Optional[str]):
        """Make another exercise active with a fresh session."""
        self.exercise = exercise
        self._profile = get_profile(exercise, self.profiles)
        self.session = EvaluationSession()
        self.last_angle = 0.0
        logger.info(f"[ExerciseEvaluator] Active exercise: {exercise} "
                    f"(profile '{self._profile.name}')")

    def reset(self):
        """Reset the session for the current exercise."""
        self.session.reset()
        self.last_angle = 0.0
        logger.info("[ExerciseEvaluator] Session reset")

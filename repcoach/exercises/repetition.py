"""
repetition.py - Repetition Counting Logic
=========================================
Turns a per-frame joint angle into motion states and counts
completed repetitions.
"""

import logging

from .base import EvaluationSession, MotionState
from .profiles import ExerciseProfile

logger = logging.getLogger(__name__)


class RepetitionStateMachine:
    """
    Counts repetitions from a stream of joint angles.

    Only the UP -> DOWN edge advances the transition counter. Every
    TRANSITIONS_PER_REPETITION such edges make one repetition, so a
    DOWN -> UP -> DOWN cycle is the counted unit. Frames in the dead zone
    between the thresholds leave the session untouched.
    """

    # ===== CONFIGURATION =====
    TRANSITIONS_PER_REPETITION = 2
    REPETITION_REWARD = 10

    @staticmethod
    def classify(angle: float, profile: ExerciseProfile) -> MotionState:
        """
        Classify a joint angle against the profile thresholds.

        Args:
            angle: Joint angle in degrees
            profile: Active exercise profile

        Returns:
            DOWN at or below down_threshold, UP at or above up_threshold,
            UNKNOWN in between
        """
        if angle <= profile.down_threshold:
            return MotionState.DOWN
        if angle >= profile.up_threshold:
            return MotionState.UP
        return MotionState.UNKNOWN

    def update(self, session: EvaluationSession, angle: float,
               profile: ExerciseProfile) -> bool:
        """
        Feed one frame's angle into the session.

        Args:
            session: Session state, mutated in place
            angle: Current joint angle in degrees
            profile: Active exercise profile

        Returns:
            True if this frame completed a repetition
        """
        current_state = self.classify(angle, profile)
        previous_state = session.previous_state

        if current_state is MotionState.UNKNOWN or current_state is previous_state:
            return False

        rep_completed = False

        if previous_state is MotionState.UP and current_state is MotionState.DOWN:
            session.transition_count += 1
            if session.transition_count == self.TRANSITIONS_PER_REPETITION:
                session.repetition_count += 1
                session.score += self.REPETITION_REWARD
                session.transition_count = 0
                rep_completed = True
                logger.info(f"[Repetition] {profile.name}: rep #{session.repetition_count} "
                            f"(score {session.score})")

        logger.debug("[Repetition] %s: %s -> %s at %.1f°",
                     profile.name, previous_state.name, current_state.name, angle)
        session.previous_state = current_state

        return rep_completed

"""
workout.py - Workout Routine
============================
Builds the exercise plan for a set of target muscles and drives one
ExerciseEvaluator per exercise in turn.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from .core.evaluator import EvaluationResult, ExerciseEvaluator
from .core.landmarks import LandmarkSet
from .exercises.profiles import ExerciseProfile

logger = logging.getLogger(__name__)


PLAN_SIZE = 10

MUSCLE_TABLE: Dict[str, List[str]] = {
    "chest": ["push_up"],
    "biceps": ["bicep_curl"],
    "triceps": ["tricep_extension"],
    "shoulders": ["shoulder_press", "lateral_raise"],
    "legs": ["squat", "lunge"],
    "back": ["deadlift"],
    "glutes": ["glute_bridge"],
    "abs": ["sit_up", "leg_raise"],
}


def build_exercise_plan(muscles: Sequence[str],
                        muscle_table: Optional[Dict[str, List[str]]] = None,
                        size: int = PLAN_SIZE,
                        rng: Optional[random.Random] = None) -> List[str]:
    """
    Build an ordered exercise list for the chosen muscles.

    Exercises for the chosen muscles come first in random order; the rest
    of the list is filled with other exercises, also shuffled.

    Args:
        muscles: Target muscle groups; unknown names are ignored
        muscle_table: Muscle -> exercises mapping (MUSCLE_TABLE if None)
        size: Maximum plan length
        rng: Random source, for reproducible plans

    Returns:
        List of at most `size` distinct exercise identifiers
    """
    table = MUSCLE_TABLE if muscle_table is None else muscle_table
    rng = rng or random.Random()

    chosen = []
    for muscle in muscles:
        if muscle not in table:
            logger.warning(f"[Workout] Unknown muscle group '{muscle}' ignored")
            continue
        for exercise in table[muscle]:
            if exercise not in chosen:
                chosen.append(exercise)
    rng.shuffle(chosen)

    rest = []
    for exercises in table.values():
        for exercise in exercises:
            if exercise not in chosen and exercise not in rest:
                rest.append(exercise)
    rng.shuffle(rest)

    return (chosen + rest)[:size]


class Workout:
    """
    Runs a plan of exercises one at a time.

    Each exercise gets a fresh counting session. The score of finished
    exercises is banked, so total_score keeps growing across the plan while
    the repetition count starts from zero for every exercise.
    """

    def __init__(self, plan: Sequence[str],
                 profiles: Optional[Dict[str, ExerciseProfile]] = None):
        if not plan:
            raise ValueError("Workout plan is empty")

        self.plan = list(plan)
        self.index = 0
        self.finished = False
        self.banked_score = 0
        # Score from earlier resets of the exercise in progress
        self.carried_score = 0
        self.history: List[Dict] = []
        self.evaluator = ExerciseEvaluator(self.plan[0], profiles)
        logger.info(f"[Workout] Plan: {', '.join(self.plan)}")

    @property
    def current_exercise(self) -> str:
        return self.plan[self.index]

    @property
    def repetition_count(self) -> int:
        return self.evaluator.repetition_count

    @property
    def exercise_score(self) -> int:
        return self.carried_score + self.evaluator.score

    @property
    def total_score(self) -> int:
        return self.banked_score + self.exercise_score

    def tick(self, landmarks: LandmarkSet) -> EvaluationResult:
        """
        Evaluate one sampled frame for the current exercise.

        Once the workout is finished frames are still measured but no
        longer counted.
        """
        if self.finished:
            return self.evaluator.measure(landmarks)
        return self.evaluator.evaluate(landmarks)

    def reset_current(self):
        """Restart counting for the current exercise, keeping its score."""
        self.carried_score += self.evaluator.score
        self.evaluator.reset()

    def _bank_current(self):
        self.history.append({
            "exercise": self.current_exercise,
            "reps": self.evaluator.repetition_count,
            "score": self.exercise_score,
        })
        self.banked_score += self.exercise_score
        self.carried_score = 0

    def next_exercise(self) -> bool:
        """
        Move to the next exercise in the plan.

        Returns:
            False if the plan was already on its last exercise; the workout
            is then finished
        """
        if self.finished:
            return False

        self._bank_current()

        if self.index >= len(self.plan) - 1:
            self.finished = True
            self.evaluator.reset()
            logger.info(f"[Workout] Finished with score {self.banked_score}")
            return False

        self.index += 1
        self.evaluator.switch_exercise(self.current_exercise)
        return True

    def summary(self) -> List[Dict]:
        """Per-exercise results, including the exercise in progress."""
        results = list(self.history)
        if not self.finished:
            results.append({
                "exercise": self.current_exercise,
                "reps": self.evaluator.repetition_count,
                "score": self.exercise_score,
            })
        return results

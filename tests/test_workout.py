import random

import pytest

from repcoach.workout import MUSCLE_TABLE, PLAN_SIZE, Workout, build_exercise_plan


def test_plan_puts_chosen_muscles_first():
    plan = build_exercise_plan(["legs", "abs"], rng=random.Random(3))
    chosen = set(MUSCLE_TABLE["legs"] + MUSCLE_TABLE["abs"])
    assert set(plan[:len(chosen)]) == chosen
    assert len(plan) == PLAN_SIZE
    assert len(set(plan)) == len(plan)


def test_plan_is_reproducible_with_seed():
    assert build_exercise_plan(["chest"], rng=random.Random(7)) == \
        build_exercise_plan(["chest"], rng=random.Random(7))


def test_plan_size_limit():
    plan = build_exercise_plan([], size=3, rng=random.Random(1))
    assert len(plan) == 3


def test_plan_ignores_unknown_muscles():
    table = {"arms": ["curl"], "legs": ["squat", "lunge"]}
    plan = build_exercise_plan(["wings", "arms"], muscle_table=table, rng=random.Random(0))
    assert plan[0] == "curl"
    assert sorted(plan[1:]) == ["lunge", "squat"]


def test_plan_shared_exercise_listed_once():
    table = {"a": ["x", "y"], "b": ["y", "z"]}
    plan = build_exercise_plan(["a", "b"], muscle_table=table, rng=random.Random(0))
    assert sorted(plan) == ["x", "y", "z"]


def test_empty_plan_rejected():
    with pytest.raises(ValueError):
        Workout([])


def test_score_carries_over_but_count_does_not(arm):
    workout = Workout(["default", "push_up"])
    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.repetition_count == 1
    assert workout.total_score == 10

    assert workout.next_exercise() is True
    assert workout.current_exercise == "push_up"
    assert workout.repetition_count == 0
    assert workout.total_score == 10

    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.total_score == 20


def test_finishing_the_plan(arm):
    workout = Workout(["default"])
    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.next_exercise() is False
    assert workout.finished
    assert workout.total_score == 10
    assert workout.next_exercise() is False
    assert workout.summary() == [{"exercise": "default", "reps": 1, "score": 10}]


def test_summary_includes_current_exercise(arm):
    workout = Workout(["squat", "default"])
    workout.next_exercise()
    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.summary() == [
        {"exercise": "squat", "reps": 0, "score": 0},
        {"exercise": "default", "reps": 1, "score": 10},
    ]


def test_reset_current_keeps_score(arm):
    workout = Workout(["default", "push_up"])
    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.total_score == 10

    workout.reset_current()
    assert workout.repetition_count == 0
    assert workout.total_score == 10

    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    assert workout.total_score == 20
    assert workout.summary() == [{"exercise": "default", "reps": 1, "score": 20}]

    workout.next_exercise()
    assert workout.total_score == 20
    assert workout.summary()[0] == {"exercise": "default", "reps": 1, "score": 20}


def test_reset_current_drops_half_cycle(arm):
    workout = Workout(["default"])
    for angle in [175, 80, 175]:
        workout.tick(arm(angle))
    workout.reset_current()
    result = workout.tick(arm(80))
    assert result.repetition_count == 0
    assert not result.repetition_completed


def test_finished_workout_stops_counting(arm):
    workout = Workout(["default"])
    for angle in [175, 80, 175, 80]:
        workout.tick(arm(angle))
    workout.next_exercise()
    assert workout.total_score == 10

    results = [workout.tick(arm(angle)) for angle in [175, 80, 175, 80]]
    assert not any(r.repetition_completed for r in results)
    assert results[0].angle == pytest.approx(175.0)
    assert workout.total_score == 10
    assert workout.repetition_count == 0

import json

import pytest

from repcoach.exercises.profiles import (
    DEFAULT_PROFILE_NAME,
    EXERCISE_PROFILES,
    ExerciseProfile,
    get_profile,
    load_profiles,
)


def test_default_profile():
    profile = EXERCISE_PROFILES[DEFAULT_PROFILE_NAME]
    assert profile.keypoints == ("left_shoulder", "left_elbow", "left_wrist")
    assert profile.down_threshold == 90
    assert profile.up_threshold == 170


def test_builtin_profiles_are_valid():
    for name, profile in EXERCISE_PROFILES.items():
        assert profile.name == name
        assert profile.down_threshold < profile.up_threshold


def test_get_known_profile():
    assert get_profile("squat").joint2 == "left_knee"


@pytest.mark.parametrize("name", ["moonwalk", "", None])
def test_unknown_exercise_uses_default(name):
    assert get_profile(name) is EXERCISE_PROFILES[DEFAULT_PROFILE_NAME]


def test_table_without_default_falls_back_to_builtin():
    table = {"squat": EXERCISE_PROFILES["squat"]}
    assert get_profile("jump", table) is EXERCISE_PROFILES[DEFAULT_PROFILE_NAME]


def test_profiles_are_immutable():
    with pytest.raises(AttributeError):
        EXERCISE_PROFILES["squat"].up_threshold = 100


def test_inverted_thresholds_rejected():
    with pytest.raises(ValueError):
        ExerciseProfile("bad", "a", "b", "c", down_threshold=170, up_threshold=90)


def test_load_without_file_returns_builtin():
    profiles = load_profiles()
    assert profiles == EXERCISE_PROFILES
    assert profiles is not EXERCISE_PROFILES


def test_load_merges_json(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({
        "squat": {"joint1": "right_hip", "joint2": "right_knee", "joint3": "right_ankle",
                  "down_threshold": 80, "up_threshold": 160},
        "wall_sit": {"joint1": "left_hip", "joint2": "left_knee", "joint3": "left_ankle",
                     "down_threshold": 95, "up_threshold": 150},
    }))
    profiles = load_profiles(str(path))
    assert profiles["squat"].joint2 == "right_knee"
    assert profiles["squat"].down_threshold == 80.0
    assert profiles["wall_sit"].up_threshold == 150.0
    assert DEFAULT_PROFILE_NAME in profiles
    assert EXERCISE_PROFILES["squat"].joint2 == "left_knee"


def test_load_missing_field(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"squat": {"joint1": "left_hip", "joint2": "left_knee"}}))
    with pytest.raises(ValueError, match="missing"):
        load_profiles(str(path))


def test_load_non_object(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(["squat"]))
    with pytest.raises(ValueError):
        load_profiles(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profiles(str(tmp_path / "nope.json"))

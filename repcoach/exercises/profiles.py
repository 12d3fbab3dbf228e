"""
profiles.py - Exercise Profiles
===============================
Static table of tracked joints and angle thresholds per exercise.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


DEFAULT_PROFILE_NAME = "default"

PROFILE_FIELDS = ("joint1", "joint2", "joint3", "down_threshold", "up_threshold")


@dataclass(frozen=True)
class ExerciseProfile:
    """
    Joints and thresholds for one exercise.

    The angle is measured at joint2, between joint1 and joint3. An angle at
    or below down_threshold is the contracted position, at or above
    up_threshold the extended one.
    """
    name: str
    joint1: str
    joint2: str
    joint3: str
    down_threshold: float = 90.0
    up_threshold: float = 170.0

    def __post_init__(self):
        if self.down_threshold >= self.up_threshold:
            raise ValueError(
                f"Profile '{self.name}': down_threshold ({self.down_threshold}) must be "
                f"below up_threshold ({self.up_threshold})"
            )

    @property
    def keypoints(self) -> Tuple[str, str, str]:
        return self.joint1, self.joint2, self.joint3


# ===== BUILT-IN PROFILES =====
EXERCISE_PROFILES: Dict[str, ExerciseProfile] = {
    profile.name: profile for profile in (
        ExerciseProfile(DEFAULT_PROFILE_NAME, "left_shoulder", "left_elbow", "left_wrist", 90, 170),
        ExerciseProfile("push_up", "left_shoulder", "left_elbow", "left_wrist", 90, 160),
        ExerciseProfile("bicep_curl", "left_shoulder", "left_elbow", "left_wrist", 50, 150),
        ExerciseProfile("tricep_extension", "left_shoulder", "left_elbow", "left_wrist", 70, 160),
        ExerciseProfile("shoulder_press", "left_hip", "left_shoulder", "left_elbow", 90, 160),
        ExerciseProfile("lateral_raise", "left_hip", "left_shoulder", "left_wrist", 30, 80),
        ExerciseProfile("squat", "left_hip", "left_knee", "left_ankle", 90, 165),
        ExerciseProfile("lunge", "left_hip", "left_knee", "left_ankle", 100, 165),
        ExerciseProfile("deadlift", "left_shoulder", "left_hip", "left_knee", 100, 165),
        ExerciseProfile("glute_bridge", "left_shoulder", "left_hip", "left_knee", 130, 165),
        ExerciseProfile("sit_up", "left_shoulder", "left_hip", "left_knee", 70, 130),
        ExerciseProfile("leg_raise", "left_shoulder", "left_hip", "left_ankle", 100, 165),
    )
}


def get_profile(name: Optional[str],
                profiles: Optional[Dict[str, ExerciseProfile]] = None) -> ExerciseProfile:
    """
    Look up the profile for an exercise.

    Unknown or empty names resolve to the 'default' profile.
    """
    table = EXERCISE_PROFILES if profiles is None else profiles
    profile = table.get(name) if name else None
    if profile is None:
        logger.debug(f"[Profiles] No profile for '{name}', using '{DEFAULT_PROFILE_NAME}'")
        profile = table.get(DEFAULT_PROFILE_NAME, EXERCISE_PROFILES[DEFAULT_PROFILE_NAME])
    return profile


def _profile_from_entry(name: str, entry: Dict) -> ExerciseProfile:
    if not isinstance(entry, dict):
        raise ValueError(f"Profile '{name}' must be an object, got {type(entry).__name__}")
    missing = [field for field in PROFILE_FIELDS if field not in entry]
    if missing:
        raise ValueError(f"Profile '{name}' is missing: {', '.join(missing)}")
    return ExerciseProfile(
        name,
        entry["joint1"],
        entry["joint2"],
        entry["joint3"],
        float(entry["down_threshold"]),
        float(entry["up_threshold"]),
    )


def load_profiles(config_path: Optional[str] = None) -> Dict[str, ExerciseProfile]:
    """
    Load exercise profiles, merging a JSON file over the built-in table.

    Args:
        config_path: Optional path to a JSON object of
            name -> {joint1, joint2, joint3, down_threshold, up_threshold}

    Returns:
        Dictionary of profiles, always containing 'default'
    """
    profiles = dict(EXERCISE_PROFILES)
    if config_path is None:
        return profiles

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Profile file not found: {config_path}")

    with open(config_path, "r") as f:
        entries = json.load(f)

    if not isinstance(entries, dict):
        raise ValueError(f"Profile file must contain a JSON object: {config_path}")

    for name, entry in entries.items():
        profiles[name] = _profile_from_entry(name, entry)

    logger.info(f"[Profiles] Loaded {len(entries)} profile(s) from {config_path}")
    return profiles

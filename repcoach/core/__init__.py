"""
Core Processing Module
======================
Contains landmark handling and exercise evaluation. The MoveNet
estimator and the video streamer live in core.pose_estimator and
core.streamer and pull in OpenCV and the model runtimes.
"""

from .landmarks import KEYPOINT_NAMES, LandmarkSet, LandmarkSource
from .evaluator import EvaluationResult, ExerciseEvaluator

__all__ = [
    'KEYPOINT_NAMES',
    'LandmarkSet',
    'LandmarkSource',
    'EvaluationResult',
    'ExerciseEvaluator'
]

"""
main.py - RepCoach console runner
Samples the camera at a fixed period, counts repetitions for each
exercise of the workout plan and draws the results.
"""

import argparse
import logging
import os
import time
from typing import Optional

import cv2
import numpy as np

from .core.evaluator import EvaluationResult
from .core.landmarks import KEYPOINT_NAMES, LandmarkSet, LandmarkSource
from .core.pose_estimator import PoseEstimator
from .core.streamer import VideoStreamer
from .exercises.base import MotionState
from .exercises.profiles import load_profiles
from .workout import MUSCLE_TABLE, Workout, build_exercise_plan

logger = logging.getLogger("repcoach")

# ============================================================================
# CONFIGURATION
# ============================================================================

# Path to the MoveNet model file (.onnx, .tflite or SavedModel directory)
MOVENET_MODEL_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), 'models', 'movenet.onnx'))

# Camera index or video file path
VIDEO_SOURCE = "0"

# Seconds between evaluated frames
SAMPLE_INTERVAL = 0.1

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# ============================================================================


class RepCoachSystem:
    """
    Main system: one pose source, one video source, one workout.
    """

    # ===== VISUALIZATION CONFIG =====
    COLOR_SKELETON = (255, 0, 0)
    COLOR_KEYPOINTS = (0, 0, 255)
    COLOR_TEXT = (255, 255, 255)
    COLOR_STATE = {
        MotionState.UP: (0, 255, 0),
        MotionState.DOWN: (0, 165, 255),
        MotionState.UNKNOWN: (200, 200, 200),
    }

    FONT = cv2.FONT_HERSHEY_SIMPLEX
    MIN_KEYPOINT_SCORE = 0.3

    SKELETON_CONNECTIONS = [
        (0, 1), (0, 2), (1, 3), (2, 4), (0, 5), (0, 6), (5, 6),
        (5, 7), (7, 9), (6, 8), (8, 10), (11, 12), (5, 11), (6, 12),
        (11, 13), (13, 15), (12, 14), (14, 16)
    ]

    def __init__(self, pose_source: LandmarkSource, streamer: VideoStreamer,
                 workout: Workout, sample_interval: float = SAMPLE_INTERVAL):
        self.pose_source = pose_source
        self.streamer = streamer
        self.workout = workout
        self.sample_interval = sample_interval
        self.frames_evaluated = 0
        self.frames_without_pose = 0

    def _evaluate(self, frame: np.ndarray):
        landmarks = self.pose_source.estimate(frame)
        if landmarks is None:
            self.frames_without_pose += 1
            return None, None

        self.frames_evaluated += 1
        result = self.workout.tick(landmarks)
        if result.repetition_completed:
            logger.info(f"{result.exercise}: rep {result.repetition_count} | "
                        f"total score {self.workout.total_score}")
        return landmarks, result

    def _draw_landmarks(self, frame: np.ndarray, landmarks: LandmarkSet):
        h, w = frame.shape[:2]
        pixels = []
        for name in KEYPOINT_NAMES:
            if name in landmarks and landmarks.scores.get(name, 1.0) > self.MIN_KEYPOINT_SCORE:
                p = landmarks[name]
                pixels.append((int(p.x * w), int(p.y * h)))
            else:
                pixels.append(None)

        for idx_a, idx_b in self.SKELETON_CONNECTIONS:
            if pixels[idx_a] is not None and pixels[idx_b] is not None:
                cv2.line(frame, pixels[idx_a], pixels[idx_b], self.COLOR_SKELETON, 2)

        for kp in pixels:
            if kp is not None:
                cv2.circle(frame, kp, 5, self.COLOR_KEYPOINTS, -1)

    def _render_frame(self, frame: np.ndarray, landmarks: Optional[LandmarkSet],
                      result: Optional[EvaluationResult]) -> np.ndarray:
        output = frame.copy()
        if landmarks is not None:
            self._draw_landmarks(output, landmarks)

        workout = self.workout
        cv2.rectangle(output, (10, 10), (330, 130), (0, 0, 0), -1)
        cv2.putText(output, f"Exercise: {workout.current_exercise} "
                            f"({workout.index + 1}/{len(workout.plan)})",
                    (20, 35), self.FONT, 0.6, self.COLOR_TEXT, 1)
        cv2.putText(output, f"Score: {workout.total_score}", (20, 65),
                    self.FONT, 0.8, (0, 255, 0), 2)
        cv2.putText(output, f"Reps: {workout.repetition_count}", (20, 95),
                    self.FONT, 0.8, self.COLOR_TEXT, 2)

        if result is not None:
            color = self.COLOR_STATE[result.motion_state]
            cv2.putText(output, f"Angle: {int(result.angle)}  {result.motion_state.name}",
                        (20, 120), self.FONT, 0.5, color, 1)
        else:
            cv2.putText(output, "No pose detected", (20, 120),
                        self.FONT, 0.5, (0, 0, 255), 1)

        return output

    def run(self, display: bool = True):
        """
        Main sampling loop.
        """
        window = "RepCoach"
        if display:
            cv2.namedWindow(window, cv2.WINDOW_NORMAL)

        print("▶️  WORKOUT STARTED...")
        print("   • ESC = Exit")
        print("   • N = Next exercise")
        print("   • R = Reset current exercise\n")

        start_time = time.time()
        self.streamer.start()

        try:
            next_tick = time.monotonic()
            while self.streamer.more() and not self.workout.finished:
                frame = self.streamer.read()
                if frame is None:
                    continue

                landmarks, result = self._evaluate(frame)

                if display:
                    cv2.imshow(window, self._render_frame(frame, landmarks, result))
                    key = cv2.waitKey(1) & 0xFF
                    if key == 27:  # ESC
                        print("\n⏹️  Stopped by user.")
                        break
                    elif key in (ord('n'), ord('N')):
                        if not self.workout.next_exercise():
                            break
                    elif key in (ord('r'), ord('R')):
                        self.workout.reset_current()

                next_tick += self.sample_interval
                delay = next_tick - time.monotonic()
                if delay > 0:
                    time.sleep(delay)
                else:
                    next_tick = time.monotonic()

        except KeyboardInterrupt:
            print("\n⏹️  Interrupted by user.")

        finally:
            total_time = time.time() - start_time

            print("\n" + "=" * 70)
            print("📊 WORKOUT SUMMARY")
            print("=" * 70)
            for entry in self.workout.summary():
                print(f"  {entry['exercise']:<18} reps: {entry['reps']:3d}  score: {entry['score']:4d}")
            print(f"Total score: {self.workout.total_score}")
            print(f"Frames evaluated: {self.frames_evaluated} "
                  f"(no pose: {self.frames_without_pose})")
            print(f"Total time: {total_time:.2f} seconds")
            print("=" * 70 + "\n")

            self.streamer.stop()
            if display:
                cv2.destroyAllWindows()


def _video_source(value: str):
    """Camera indices arrive as strings on the command line."""
    return int(value) if value.isdigit() else value


def main():
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description="RepCoach: pose-based repetition counter"
    )

    parser.add_argument('--video', type=str, default=VIDEO_SOURCE,
                        help='Camera index or video file path')
    parser.add_argument('--model', type=str, default=MOVENET_MODEL_PATH,
                        help='Path to MoveNet model (.onnx, .tflite or SavedModel directory)')
    parser.add_argument('--muscles', nargs='*', default=[],
                        choices=sorted(MUSCLE_TABLE),
                        help='Muscle groups to train first')
    parser.add_argument('--profiles', type=str, default=None,
                        help='Optional JSON file with exercise profile overrides')
    parser.add_argument('--interval', type=float, default=SAMPLE_INTERVAL,
                        help='Seconds between evaluated frames')
    parser.add_argument('--no-display', action='store_true',
                        help='Run without displaying video window')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        print("\n" + "=" * 70)
        print("🏋️  REPCOACH: Pose-based Repetition Counter")
        print("=" * 70 + "\n")

        profiles = load_profiles(args.profiles)
        plan = build_exercise_plan(args.muscles)
        workout = Workout(plan, profiles)

        pose_source = PoseEstimator(args.model)
        streamer = VideoStreamer(_video_source(args.video))

        system = RepCoachSystem(pose_source, streamer, workout, sample_interval=args.interval)
        system.run(display=not args.no_display)

    except Exception as e:
        logger.exception(f"Error: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())

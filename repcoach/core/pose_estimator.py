"""
pose_estimator.py - MoveNet Pose Estimation
============================================
Handles MoveNet model loading and turns inference output into landmarks.
"""

import logging
import os
from typing import Optional

import cv2
import numpy as np

from .landmarks import KEYPOINT_NAMES, LandmarkSet, LandmarkSource

logger = logging.getLogger(__name__)


class PoseEstimator(LandmarkSource):
    """
    Handles MoveNet model loading and inference.
    Accepts SinglePose and MultiPose models; for MultiPose the most
    confident person in the frame is used.
    """

    INPUT_SIZE = 256
    MIN_DETECTION_SCORE = 0.3

    def __init__(self, model_path: str, input_size: int = INPUT_SIZE):
        """
        Initialize the pose estimator with MoveNet model.

        Args:
            model_path: Path to the SavedModel directory, .tflite, or .onnx file
            input_size: Square input resolution expected by the model
        """
        if not os.path.exists(model_path):
            raise FileNotFoundError(f"MoveNet model not found at: {model_path}")

        self.model_path = model_path
        self.input_size = input_size

        if model_path.endswith('.onnx'):
            import onnxruntime as ort
            logger.info(f"[PoseEstimator] Loading MoveNet ONNX model: {model_path}")
            providers = ['CPUExecutionProvider']
            self.ort_session = ort.InferenceSession(model_path, providers=providers)
            self.model_type = 'onnx'
        elif model_path.endswith('.tflite'):
            import tensorflow as tf
            logger.info(f"[PoseEstimator] Loading MoveNet TFLite model: {model_path}")
            self.interpreter = tf.lite.Interpreter(model_path=model_path)
            self.interpreter.allocate_tensors()
            self.input_details = self.interpreter.get_input_details()
            self.output_details = self.interpreter.get_output_details()
            self.model_type = 'tflite'
        else:
            import tensorflow as tf
            logger.info(f"[PoseEstimator] Loading MoveNet SavedModel: {model_path}")
            self._tf = tf
            self.model = tf.saved_model.load(model_path)
            self.movenet = self.model.signatures['serving_default']
            self.model_type = 'tf'

        logger.info("[PoseEstimator] Model loaded successfully")

    def _preprocess_frame(self, frame: np.ndarray) -> np.ndarray:
        """
        Preprocess frame for MoveNet inference.

        Args:
            frame: BGR image from OpenCV

        Returns:
            Preprocessed array ready for inference
        """
        img = cv2.resize(frame, (self.input_size, self.input_size))
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)

        if self.model_type == 'tflite':
            return np.expand_dims(img.astype(self.input_details[0]['dtype']), axis=0)
        return np.expand_dims(img.astype(np.int32), axis=0)

    def infer(self, frame: np.ndarray) -> np.ndarray:
        """Run MoveNet inference on frame and return the raw output for the batch item."""
        input_data = self._preprocess_frame(frame)

        if self.model_type == 'onnx':
            input_name = self.ort_session.get_inputs()[0].name
            output = self.ort_session.run(None, {input_name: input_data})[0][0]
        elif self.model_type == 'tflite':
            self.interpreter.set_tensor(self.input_details[0]['index'], input_data)
            self.interpreter.invoke()
            output = self.interpreter.get_tensor(self.output_details[0]['index'])[0]
        else:
            input_tensor = self._tf.convert_to_tensor(input_data)
            output = self.movenet(input_tensor)['output_0'].numpy()[0]

        return np.asarray(output)

    @classmethod
    def select_person(cls, output: np.ndarray) -> Optional[np.ndarray]:
        """
        Pick one person's keypoints from MoveNet output.

        Args:
            output: SinglePose (1, 17, 3) or MultiPose (N, 56) array

        Returns:
            Keypoints (17, 3) as [y, x, score], or None if nobody passes
            MIN_DETECTION_SCORE
        """
        keypoint_count = len(KEYPOINT_NAMES)

        if output.ndim == 3 and output.shape[-2:] == (keypoint_count, 3):
            keypoints = output[0]
            if float(np.mean(keypoints[:, 2])) < cls.MIN_DETECTION_SCORE:
                return None
            return keypoints

        if output.ndim == 2 and output.shape[-1] == keypoint_count * 3 + 5:
            # MultiPose rows: 51 keypoint values then [ymin, xmin, ymax, xmax, score]
            best = int(np.argmax(output[:, -1]))
            if output[best, -1] < cls.MIN_DETECTION_SCORE:
                return None
            return output[best, :keypoint_count * 3].reshape((keypoint_count, 3))

        raise ValueError(f"Unexpected MoveNet output shape: {output.shape}")

    def estimate(self, frame: np.ndarray) -> Optional[LandmarkSet]:
        keypoints = self.select_person(self.infer(frame))
        if keypoints is None:
            return None
        return LandmarkSet.from_movenet(keypoints)

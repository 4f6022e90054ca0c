"""Webcam finger pointer: an optional third input source.

The index fingertip is tracked with MediaPipe on a background thread, mapped
into arena coordinates and smoothed. Each frame the host asks for an
InputSnapshot that steers the snake head toward the fingertip.
"""

import logging
import math
import threading
import time
from collections import deque

import cv2
import mediapipe as mp

from config import *
from snike.input import InputSnapshot

logger = logging.getLogger(__name__)


class HandTracker:
    """Handles hand tracking using MediaPipe with jump rejection."""

    def __init__(self):
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            min_detection_confidence=0.5,
            min_tracking_confidence=0.5,
            model_complexity=1
        )
        self.prev_position = None

    def find_finger_position(self, frame):
        """Return ``(position, detected)`` for the index fingertip in frame pixels."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return self.prev_position, False

        index_finger = results.multi_hand_landmarks[0].landmark[8]
        h, w, _ = frame.shape
        new_pos = (int(index_finger.x * w), int(index_finger.y * h))

        # A sudden 200px jump is almost always a misdetection
        if self.prev_position is not None:
            dist = math.hypot(new_pos[0] - self.prev_position[0],
                              new_pos[1] - self.prev_position[1])
            if dist > 200:
                return self.prev_position, True

        self.prev_position = new_pos
        return new_pos, True

    def close(self):
        self.hands.close()


class CameraPointer:
    """Reads the camera on a daemon thread and publishes a smoothed point."""

    def __init__(self, width, height, camera_index=0):
        self.width = width
        self.height = height
        self.smooth_pos = None
        self.position_history = deque(maxlen=SMOOTHING_WINDOW)
        self.lock = threading.Lock()
        self.shared_pos = None
        self.detected = False
        self.running = False
        self.thread = None
        self.tracker = None

        self.cap = cv2.VideoCapture(camera_index)
        if not self.cap.isOpened():
            logger.warning("Could not open camera %s, finger steering disabled", camera_index)
            self.cap = None
            return
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, CAMERA_WIDTH)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CAMERA_HEIGHT)
        self.tracker = HandTracker()

    @property
    def available(self):
        return self.cap is not None

    def start(self):
        if not self.available:
            return
        self.running = True
        self.thread = threading.Thread(target=self.camera_loop, daemon=True)
        self.thread.start()
        logger.info("Camera pointer started")

    def resize(self, width, height):
        with self.lock:
            self.width = width
            self.height = height

    def map_coordinates(self, camera_pos):
        """Map camera pixels to arena coordinates, mirrored if configured."""
        x, y = camera_pos
        if CAMERA_MIRROR:
            x = CAMERA_WIDTH - x
        with self.lock:
            width, height = self.width, self.height
        return (x * width / CAMERA_WIDTH, y * height / CAMERA_HEIGHT)

    def smooth_position(self, new_pos):
        """Weighted moving average followed by exponential smoothing."""
        self.position_history.append(new_pos)

        total_weight = 0.0
        weighted_x = 0.0
        weighted_y = 0.0
        for i, pos in enumerate(self.position_history):
            weight = (i + 1) / len(self.position_history)
            weighted_x += pos[0] * weight
            weighted_y += pos[1] * weight
            total_weight += weight
        averaged = (weighted_x / total_weight, weighted_y / total_weight)

        if self.smooth_pos is None:
            self.smooth_pos = averaged
        else:
            self.smooth_pos = (
                self.smooth_pos[0] * (1 - SMOOTHING_FACTOR) + averaged[0] * SMOOTHING_FACTOR,
                self.smooth_pos[1] * (1 - SMOOTHING_FACTOR) + averaged[1] * SMOOTHING_FACTOR,
            )
        return self.smooth_pos

    def camera_loop(self):
        """Runs hand tracking in a separate thread."""
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                time.sleep(0.01)
                continue

            finger_pos, detected = self.tracker.find_finger_position(frame)
            game_pos = None
            if detected and finger_pos is not None:
                game_pos = self.smooth_position(self.map_coordinates(finger_pos))

            with self.lock:
                self.shared_pos = game_pos
                self.detected = detected
            time.sleep(0.01)

    def latest(self):
        with self.lock:
            return self.shared_pos if self.detected else None

    def snapshot(self, head):
        """Steer from ``head`` toward the fingertip, if one is visible."""
        return InputSnapshot.towards(head, self.latest(), FINGER_DEAD_ZONE)

    def stop(self):
        self.running = False
        if self.thread is not None and self.thread.is_alive():
            self.thread.join(timeout=1.0)
        if self.cap is not None:
            self.cap.release()
        if self.tracker is not None:
            self.tracker.close()

import logging
import os
from datetime import datetime
import pygame
import cv2
import numpy as np

logger = logging.getLogger(__name__)


def recording_path(rows: int, cols: int, directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(directory, f"animate_{rows}x{cols}_{ts}.mp4")


class VideoRecorder:
    """
    Writes one video frame per generator tick.

    fps should be the rate frames are actually captured at, so playback
    runs at the same speed as the window.
    """

    def __init__(self, output_file: str, fps: int, active=True):
        self.output_file = output_file
        self.fps = fps
        self.active = active
        self.writer = None
        self.frame_count = 0

    def _open(self, size):
        directory = os.path.dirname(self.output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, size)
        logger.info(f"Recording {size[0]}x{size[1]} at {self.fps} fps to {self.output_file}")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return
        if self.writer is None:
            self._open(surface.get_size())

        # surfarray is column-major RGB
        rgb = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        self.writer.write(cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def stop(self):
        if self.writer is None:
            return
        self.writer.release()
        self.writer = None
        logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")

"""Post-processing of object-detector output: labels, boxes and suppression."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .enums import ViolationKind

MODEL_SIZE = 640
CONFIDENCE_THRESHOLD = 0.5
IOU_THRESHOLD = 0.7
_COORDINATES = 4


class Label(enum.Enum):
    """Class predicted by the detector."""

    FACING_BACKWARDS = 0
    MASK_WEARED_INCORRECT = 1
    WITH_MASK = 2
    WITHOUT_MASK = 3
    UNKNOWN = 4

    @classmethod
    def from_index(cls, index: int) -> Label:
        """Map a class index from the model; unknown indices give UNKNOWN."""
        if index in (0, 1, 2, 3):
            return cls(index)
        return cls.UNKNOWN

    def color(self) -> tuple[float, float, float, float]:
        """Drawing colour for the label, as a four-channel scalar."""
        return _COLORS[self]


_COLORS: dict[Label, tuple[float, float, float, float]] = {
    Label.FACING_BACKWARDS: (255.0, 255.0, 1.0, 255.0),
    Label.MASK_WEARED_INCORRECT: (10.0, 200.0, 255.0, 255.0),
    Label.WITH_MASK: (40.0, 255.0, 1.0, 255.0),
    Label.WITHOUT_MASK: (10.0, 10.0, 255.0, 255.0),
    Label.UNKNOWN: (200.0, 0.0, 250.0, 255.0),
}


def _to_unsigned(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


def _to_signed(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(value)


@dataclass(frozen=True)
class OutputBox:
    """A detected box in pixel coordinates, with its class and confidence."""

    x1: float
    y1: float
    x2: float
    y2: float
    z: float
    label: Label
    probability: float

    def crop(self, frame: Any) -> np.ndarray:
        """Cut the box out of an H x W x 3 frame as a height x width x 3 image.

        The box's x axis indexes the frame's rows and its y axis the columns.
        """
        pixels = np.asarray(frame)
        width = _to_unsigned(self.x2 - self.x1)
        height = _to_unsigned(self.y2 - self.y1)
        row_start = _to_signed(self.x1)
        col_start = _to_signed(self.y1)
        if width and height:
            rows, cols = pixels.shape[:2]
            if (
                row_start < 0
                or col_start < 0
                or row_start + width > rows
                or col_start + height > cols
            ):
                raise IndexError("box lies outside the frame")
        region = pixels[row_start : row_start + width, col_start : col_start + height]
        return np.ascontiguousarray(region.transpose(1, 0, 2)[:height, :width])


def intersection(box1: OutputBox, box2: OutputBox) -> float:
    """Signed overlap area; not clamped at zero for disjoint boxes."""
    x1 = max(box1.x1, box2.x1)
    y1 = max(box1.y1, box2.y1)
    x2 = min(box1.x2, box2.x2)
    y2 = min(box1.y2, box2.y2)
    return (x2 - x1) * (y2 - y1)


def union(box1: OutputBox, box2: OutputBox) -> float:
    area1 = (box1.x2 - box1.x1) * (box1.y2 - box1.y1)
    area2 = (box2.x2 - box2.x1) * (box2.y2 - box2.y1)
    return area1 + area2 - intersection(box1, box2)


def iou(box1: OutputBox, box2: OutputBox) -> float:
    """Intersection over union; NaN or infinite when the union is zero."""
    overlap = intersection(box1, box2)
    total = union(box1, box2)
    if total == 0:
        if overlap == 0 or math.isnan(overlap):
            return math.nan
        return math.copysign(math.inf, overlap)
    return overlap / total


def _best_class(scores: list[float]) -> tuple[int, float]:
    if not scores:
        raise ValueError("prediction row has no class scores")
    best_index, best_score = 0, scores[0]
    for index, score in enumerate(scores[1:], start=1):
        if score > best_score:
            best_index, best_score = index, score
    return best_index, best_score


def process_output(output: Any, img_width: int, img_height: int) -> list[OutputBox]:
    """Turn transposed model output of shape (N, 4 + classes, batch) into boxes.

    Only the first batch entry is read. Rows under the confidence threshold
    are dropped, and overlapping boxes are suppressed, best first.
    """
    array = np.asarray(output, dtype=np.float32)
    if array.ndim != 3:
        raise ValueError("model output must have three dimensions")
    boxes: list[OutputBox] = []
    for row in array[:, :, 0]:
        values = [float(value) for value in row]
        class_id, probability = _best_class(values[_COORDINATES:])
        if probability < CONFIDENCE_THRESHOLD:
            continue
        xc = values[0] / MODEL_SIZE * img_width
        yc = values[1] / MODEL_SIZE * img_height
        w = values[2] / MODEL_SIZE * img_width
        h = values[3] / MODEL_SIZE * img_height
        x1, x2 = xc - w / 2.0, xc + w / 2.0
        y1, y2 = yc - h / 2.0, yc + h / 2.0
        boxes.append(
            OutputBox(
                x1=x1,
                y1=y1,
                x2=x2,
                y2=y2,
                z=(x2 - x1) * (y2 - y1),
                label=Label.from_index(class_id),
                probability=probability,
            )
        )

    boxes.sort(key=lambda candidate: candidate.probability, reverse=True)
    result: list[OutputBox] = []
    while boxes:
        first = boxes[0]
        result.append(first)
        boxes = [candidate for candidate in boxes if iou(first, candidate) < IOU_THRESHOLD]
    return result


def as_input(frame: Any) -> np.ndarray:
    """Model input tensor (1, 3, 640, 640) of channel values scaled to [0, 1]."""
    pixels = np.asarray(frame)
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise ValueError("frame must be an H x W x 3 array")
    if pixels.shape[0] < MODEL_SIZE or pixels.shape[1] < MODEL_SIZE:
        raise ValueError(f"frame must be at least {MODEL_SIZE} x {MODEL_SIZE}")
    square = pixels[:MODEL_SIZE, :MODEL_SIZE, :3].astype(np.float32) / np.float32(255.0)
    return np.ascontiguousarray(square.transpose(2, 0, 1)[np.newaxis])


def violation_kind_for(label: Label) -> ViolationKind | None:
    """The violation a detected label is recorded as, if any."""
    if label is Label.FACING_BACKWARDS:
        return ViolationKind.FOOT_TRAFFIC
    if label in (Label.MASK_WEARED_INCORRECT, Label.WITHOUT_MASK):
        return ViolationKind.FACEMASK_PROTOCOL
    return None
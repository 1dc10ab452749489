"""
Spirograph curve sampler.

A point turns on a small circle whose centre turns on a large circle. The
traced curve is drawn as line segments, bisecting each coarse step until
every chord is shorter than a maximum distance.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]
Color = Tuple[int, int, int, int]

TAU = 2.0 * math.pi

# ── Default parameter values ───────────────────────────────────────
DEFAULTS = {
    "large_radius": 200.0,
    "small_radius": 100.0,
    "large_frequency": 20,     # revolutions of the large circle per period
    "small_frequency": 50,     # revolutions of the small circle per period
    "interpolate_distance_max": 30.0,
}

# Slider ranges for the GUI (min, max)
PARAM_RANGES = {
    "large_radius": (10.0, 500.0),
    "small_radius": (10.0, 500.0),
    "large_frequency": (10, 1000),
    "small_frequency": (10, 1000),
    "interpolate_distance_max": (1.0, 100.0),
}

# Display labels for GUI
PARAM_LABELS = {
    "large_radius": "large radius",
    "small_radius": "small radius",
    "large_frequency": "large frequency",
    "small_frequency": "small frequency",
    "interpolate_distance_max": "resolution",
}

# Ordered list of parameter keys for consistent UI ordering
PARAM_ORDER = [
    "large_radius", "small_radius",
    "large_frequency", "small_frequency",
    "interpolate_distance_max",
]

INT_PARAMS = ("large_frequency", "small_frequency")

# ── Drawing constants ──────────────────────────────────────────────
STROKE_WIDTH = 3.0
STROKE_COLOR: Color = (0, 255, 0, 255)

# Hard cap on subdivisions for one coarse pair
MAX_OPERATIONS = 10_000


class InvalidFrequencyError(ValueError):
    """Raised when a frequency is zero or negative."""


def distance(point1: Point2D, point2: Point2D) -> float:
    return math.hypot(point1[0] - point2[0], point1[1] - point2[1])


def average_angle(a: float, b: float) -> float:
    """
    Midpoint of two angles on the shorter arc between them.

    Exactly antipodal angles have two equally short arcs; those fall back
    to the arithmetic mean. The result is not normalised to [0, 2π).
    """
    if (a + math.pi) % TAU == b:
        return ((a + b) / 2.0) % TAU
    return math.atan2(math.sin(a) + math.sin(b), math.cos(a) + math.cos(b))


@dataclass(frozen=True)
class SpiroPoint:
    """A traced point and the two angles that produced it."""
    point: Point2D
    circle_angle: float
    point_angle: float

    @classmethod
    def start(cls, center: Point2D, large_radius: float, small_radius: float) -> "SpiroPoint":
        """Point at angles (0, 0), where every curve begins."""
        return calc_point(center, large_radius, small_radius, 0.0, 0.0)


def calc_point(
    center: Point2D,
    large_radius: float,
    small_radius: float,
    circle_angle: float,
    point_angle: float,
) -> SpiroPoint:
    small_center_x = center[0] + large_radius * math.cos(circle_angle)
    small_center_y = center[1] + large_radius * math.sin(circle_angle)
    return SpiroPoint(
        point=(
            small_center_x + small_radius * math.cos(point_angle),
            small_center_y + small_radius * math.sin(point_angle),
        ),
        circle_angle=circle_angle,
        point_angle=point_angle,
    )


class SegmentBuffer:
    """
    Render sink that keeps segments in memory.

    Useful headless and in tests; ``as_array()`` returns an (n, 2, 2) array
    of segment endpoints.
    """

    def __init__(self):
        self.segments: List[Tuple[Point2D, Point2D]] = []
        self.strokes: List[Tuple[float, Color]] = []

    def draw_segment(self, p1: Point2D, p2: Point2D, stroke_width: float, color: Color):
        self.segments.append((p1, p2))
        self.strokes.append((stroke_width, color))

    def __len__(self) -> int:
        return len(self.segments)

    def as_array(self) -> np.ndarray:
        if not self.segments:
            return np.empty((0, 2, 2), dtype=np.float64)
        return np.asarray(self.segments, dtype=np.float64)

    def chord_lengths(self) -> np.ndarray:
        segs = self.as_array()
        return np.linalg.norm(segs[:, 1] - segs[:, 0], axis=1)


class Spiro:
    """
    Curve sampler for one set of parameters.

    Built fresh for every redraw with :meth:`from_frequency`, then
    :meth:`draw` walks the coarse steps and sends each accepted chord to
    the sink.
    """

    def __init__(
        self,
        center: Point2D,
        large_radius: float,
        small_radius: float,
        large_angular_velocity: float,
        small_angular_velocity: float,
        nb_points: int,
        interpolate_distance_max: float,
        max_operations: int = MAX_OPERATIONS,
    ):
        self.center = (float(center[0]), float(center[1]))
        self.large_radius = float(large_radius)
        self.small_radius = float(small_radius)
        self.large_angular_velocity = large_angular_velocity
        self.small_angular_velocity = small_angular_velocity
        self.nb_points = nb_points
        self.interpolate_distance_max = float(interpolate_distance_max)
        self.max_operations = max_operations

        # Diagnostics from the last draw()
        self.segment_count = 0
        self.capped_pairs = 0

    @classmethod
    def from_frequency(
        cls,
        center: Point2D,
        large_radius: float,
        small_radius: float,
        large_frequency: int,
        small_frequency: int,
        interpolate_distance_max: float,
        max_operations: int = MAX_OPERATIONS,
    ) -> "Spiro":
        large_frequency = int(large_frequency)
        small_frequency = int(small_frequency)
        if large_frequency <= 0 or small_frequency <= 0:
            raise InvalidFrequencyError(
                f"frequencies must be positive, got "
                f"large={large_frequency}, small={small_frequency}"
            )

        return cls(
            center=center,
            large_radius=large_radius,
            small_radius=small_radius,
            large_angular_velocity=TAU / large_frequency,
            small_angular_velocity=TAU / small_frequency,
            nb_points=math.lcm(large_frequency, small_frequency) + 1,
            interpolate_distance_max=interpolate_distance_max,
            max_operations=max_operations,
        )

    def _midpoint(self, p1: SpiroPoint, p2: SpiroPoint) -> SpiroPoint:
        return calc_point(
            self.center,
            self.large_radius,
            self.small_radius,
            average_angle(p1.circle_angle, p2.circle_angle),
            average_angle(p1.point_angle, p2.point_angle),
        )

    def _interpolate(self, previous: SpiroPoint, current: SpiroPoint, sink, offset: Point2D) -> int:
        """
        Bisect one coarse pair until every chord is short enough.

        Returns the number of segments emitted. Stops early once
        ``max_operations`` subdivisions have run.
        """
        ox, oy = offset
        emitted = 0
        operations = 0

        # previous is on top, so the pair is traversed from previous to current
        to_be_constructed = [current, previous]
        while len(to_be_constructed) > 1 and operations < self.max_operations:
            operations += 1
            p1 = to_be_constructed.pop()
            p2 = to_be_constructed[-1]
            if distance(p1.point, p2.point) < self.interpolate_distance_max:
                sink.draw_segment(
                    (p1.point[0] + ox, p1.point[1] + oy),
                    (p2.point[0] + ox, p2.point[1] + oy),
                    STROKE_WIDTH,
                    STROKE_COLOR,
                )
                emitted += 1
            else:
                to_be_constructed.append(self._midpoint(p1, p2))
                to_be_constructed.append(p1)

        if len(to_be_constructed) > 1:
            self.capped_pairs += 1
            logger.debug(
                "Subdivision cap of %d reached between angles (%.4f, %.4f) and (%.4f, %.4f)",
                self.max_operations,
                previous.circle_angle, previous.point_angle,
                current.circle_angle, current.point_angle,
            )
        return emitted

    def draw(self, sink, offset: Optional[Point2D] = None):
        """
        Sample the whole curve and emit it to ``sink``.

        Args:
            sink: object with ``draw_segment(p1, p2, stroke_width, color)``
            offset: translation applied to every emitted point
        """
        if offset is None:
            offset = (0.0, 0.0)

        self.segment_count = 0
        self.capped_pairs = 0

        point2 = SpiroPoint.start(self.center, self.large_radius, self.small_radius)
        for _ in range(self.nb_points):
            point1 = point2
            point2 = calc_point(
                self.center,
                self.large_radius,
                self.small_radius,
                (point1.circle_angle + self.large_angular_velocity) % TAU,
                (point1.point_angle + self.small_angular_velocity) % TAU,
            )
            self.segment_count += self._interpolate(point1, point2, sink, offset)

        if self.capped_pairs:
            logger.warning(
                "Subdivision cap of %d reached on %d of %d coarse steps",
                self.max_operations, self.capped_pairs, self.nb_points,
            )
        logger.debug("Spiro drawn with %d segments (interpolation included)", self.segment_count)

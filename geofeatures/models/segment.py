import math


class LineSegment:
    """
    A straight segment between two integer pixel points.

    Supports:
      - length (Euclidean norm of start - end)
      - signed direction angle, atan2(dy, dx), in (-180, 180] degrees
      - midpoint used by the merge distance test
      - the literal merge rule (start of this, end of other)
    """

    __slots__ = ("x1", "y1", "x2", "y2")

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, x1, y1, x2, y2):
        self.x1 = int(x1)
        self.y1 = int(y1)
        self.x2 = int(x2)
        self.y2 = int(y2)

    @classmethod
    def from_points(cls, start, end):
        return cls(start[0], start[1], end[0], end[1])

    @classmethod
    def from_array(cls, vec):
        """Build from an (x1, y1, x2, y2) row as returned by cv2.HoughLinesP."""
        x1, y1, x2, y2 = (int(v) for v in vec)
        return cls(x1, y1, x2, y2)

    # ------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------
    @property
    def start(self):
        return (self.x1, self.y1)

    @property
    def end(self):
        return (self.x2, self.y2)

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def length(self):
        return math.dist(self.start, self.end)

    @property
    def angle_radians(self):
        """Raw signed direction, no wraparound normalisation."""
        return math.atan2(self.y2 - self.y1, self.x2 - self.x1)

    @property
    def angle(self):
        return math.degrees(self.angle_radians)

    @property
    def midpoint(self):
        return ((self.x1 + self.x2) * 0.5, (self.y1 + self.y2) * 0.5)

    # ------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------
    def merged_with(self, other):
        """
        Joins this segment's start to the other's end. Not the two most
        distant endpoints.
        """
        return LineSegment(self.x1, self.y1, other.x2, other.y2)

    # ------------------------------------------------------------
    # Comparison & repr
    # ------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (other.x1, other.y1, other.x2, other.y2)

    def __hash__(self):
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self):
        return f"LineSegment({self.start} -> {self.end}, angle={self.angle:.1f})"

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CornerPoint:
    """
    One corner returned by the scoring primitive.

    Coordinates keep the primitive's sub-pixel floats; rank is implied by
    position in the detector's list (library-defined ordering).
    """

    x: float
    y: float

    def as_int(self) -> Tuple[int, int]:
        """Truncates toward zero, matching the exported feature format."""
        return int(self.x), int(self.y)

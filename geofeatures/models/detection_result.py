from dataclasses import dataclass, field
from typing import Dict, List, Union

import numpy as np

from .corner import CornerPoint
from .segment import LineSegment


@dataclass
class DetectionResult:
    """
    Output of one analyze_features() pass, owned by the detector that made it.

    output_image: annotated BGR image in canonical coordinates
    features:     CornerPoint or LineSegment objects, in detection/merge order
    extras:       auxiliary images kept for display (e.g. "edges", "original")
    """

    output_image: np.ndarray
    features: List[Union[CornerPoint, LineSegment]] = field(default_factory=list)
    extras: Dict[str, np.ndarray] = field(default_factory=dict)

    def __len__(self):
        return len(self.features)

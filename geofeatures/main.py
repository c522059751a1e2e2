"""
Runs line detection, corner detection and the combined overlay on one image.

The package uses relative imports, so run it as a module or through the
installed console script, not as a file path:

    python -m geofeatures.main [image_path]
    geofeatures [image_path]
"""

import logging
import sys

from .config import DEFAULT_IMAGE_PATH, SHOW_WINDOWS, OutputPaths
from .detectors import CornerDetector, LineDetector
from .exceptions import FeatureDetectionError
from .utils.image_io import ensure_output_dir
from .visualization import CompositeVisualizer

logger = logging.getLogger(__name__)


def run_demo(image_path, paths: OutputPaths, show: bool = False):
    """
    Runs the complete pipeline for one image:
      1. Line detection  (report, optional display, features + image export)
      2. Corner detection (same)
      3. Combined overlay of both feature sets
    """

    print(f"\n=== Processing image: {image_path} ===")
    ensure_output_dir(paths.output_dir)

    line_detector = LineDetector(image_path)
    corner_detector = CornerDetector(image_path)

    # ------------------------------
    # STEP 1 - LINE DETECTION
    # ------------------------------
    line_detector.analyze_features()
    print("\nLine Detection Results:\n" + line_detector.report())
    if show:
        line_detector.plot_features()
    line_detector.write_features_to_file(paths.resolve(paths.line_features))
    line_detector.save_output_image(paths.resolve(paths.line_image))

    # ------------------------------
    # STEP 2 - CORNER DETECTION
    # ------------------------------
    corner_detector.analyze_features()
    print("\nCorner Detection Results:\n" + corner_detector.report())
    if show:
        corner_detector.plot_features()
    corner_detector.write_features_to_file(paths.resolve(paths.corner_features))
    corner_detector.save_output_image(paths.resolve(paths.corner_image))

    # ------------------------------
    # STEP 3 - COMBINED OVERLAY
    # ------------------------------
    visualizer = CompositeVisualizer(paths.resolve(paths.combined_image))
    combined = visualizer.combine(line_detector, corner_detector, show=show)

    print(f"[OK] Finished {image_path}")
    return combined


def main(argv=None, paths: OutputPaths = None, show: bool = SHOW_WINDOWS) -> int:
    """
    Main entry point and the only recovery boundary.

    argv may hold a single image path; otherwise DEFAULT_IMAGE_PATH is used.
    Returns 0 on success and 1 when loading or exporting fails.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if argv is None:
        argv = sys.argv[1:]
    image_path = argv[0] if argv else DEFAULT_IMAGE_PATH
    paths = paths or OutputPaths()

    try:
        run_demo(image_path, paths, show=show)
    except FeatureDetectionError as exc:
        logger.error("An exception has occurred: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

import numpy as np
import pytest

from geofeatures.detectors.preprocessing import PreprocessingPipeline
from geofeatures.utils.image_buffer import ImageBuffer


class RecordingBuffer(ImageBuffer):
    """ImageBuffer that remembers which steps ran and in what order."""

    def __init__(self, image):
        super().__init__(image)
        self.calls = []

    def filter_noise(self, ksize, sigma):
        self.calls.append(("filter_noise", ksize, sigma))
        super().filter_noise(ksize, sigma)

    def rescale(self, width, height):
        self.calls.append(("rescale", width, height))
        super().rescale(width, height)

    def convert_to_gray(self):
        self.calls.append(("convert_to_gray",))
        super().convert_to_gray()

    def denoise_bilateral(self, diameter, sigma_color, sigma_space):
        self.calls.append(("denoise_bilateral", diameter, sigma_color, sigma_space))
        super().denoise_bilateral(diameter, sigma_color, sigma_space)


@pytest.mark.parametrize("channels", [3, 4])
@pytest.mark.parametrize("height, width", [(240, 320), (600, 800), (1080, 1920)])
def test_output_is_single_channel_800x600(channels, height, width):
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)

    gray = PreprocessingPipeline().run(ImageBuffer(image))

    assert gray.shape == (600, 800)
    assert gray.dtype == np.uint8


def test_steps_run_in_fixed_order_with_fixed_parameters(flat_image):
    buffer = RecordingBuffer(flat_image)

    PreprocessingPipeline().run(buffer)

    assert buffer.calls == [
        ("filter_noise", (5, 5), 1.5),
        ("rescale", 800, 600),
        ("convert_to_gray",),
        ("denoise_bilateral", 9, 75, 75),
    ]
    assert [c[0] for c in buffer.calls] == list(PreprocessingPipeline.STEPS)


def test_pristine_copy_is_untouched(flat_image):
    buffer = ImageBuffer(flat_image)

    PreprocessingPipeline().run(buffer)

    assert buffer.original.shape == (240, 320, 3)
    assert np.array_equal(buffer.original, flat_image)
    assert not buffer.original.flags.writeable


def test_buffer_clones_its_input(flat_image):
    buffer = ImageBuffer(flat_image)
    flat_image[0, 0] = (0, 0, 0)

    assert tuple(buffer.original[0, 0]) == (128, 128, 128)
    assert tuple(buffer.working[0, 0]) == (128, 128, 128)


def test_reset_restores_working_copy(flat_image):
    buffer = ImageBuffer(flat_image)
    PreprocessingPipeline().run(buffer)

    buffer.reset()

    assert buffer.working.shape == (240, 320, 3)
    assert buffer.working.flags.writeable


def test_gray_conversion_on_gray_buffer_is_a_copy():
    gray = np.full((10, 10), 7, dtype=np.uint8)
    buffer = ImageBuffer(gray)

    buffer.convert_to_gray()

    assert buffer.working.shape == (10, 10)
    assert buffer.channels == 1

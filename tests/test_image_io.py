"""
Test the Pillow image adapters.
"""

import numpy as np
from PIL import Image

from slm_grating import Grating, ImageData, read_image_data, write_image_data


def test_png_roundtrip_keeps_alpha(tmp_path):
    data = np.array([1, 2, 3, 4, 5, 6, 7, 8], dtype=np.uint8)
    path = write_image_data(tmp_path / "nested" / "out.png", ImageData(2, 1, data))

    assert path.exists()
    image = read_image_data(path)
    assert (image.width, image.height) == (2, 1)
    np.testing.assert_array_equal(image.data, data)


def test_jpeg_drops_alpha(tmp_path):
    grating = Grating.from_pattern(4, 4, lambda x, y: 0)
    grating.set_pixel(0, 0, (0, 0, 0, 10))

    path = write_image_data(tmp_path / "out.jpg", grating.to_image_data())
    image = read_image_data(path)

    assert (image.width, image.height) == (4, 4)
    assert (image.data.reshape(-1, 4)[:, 3] == 255).all()


def test_read_grayscale_image(tmp_path):
    path = tmp_path / "gray.png"
    Image.fromarray(np.array([[0, 128], [255, 64]], dtype=np.uint8)).save(path)

    grating = Grating.from_image_data(2, 2, read_image_data(path))
    assert grating.get_pixel_mono(1, 0) == 128
    assert grating.get_pixel_mono(1, 1) == 64


def test_unknown_extension_defaults_to_png(tmp_path):
    path = write_image_data(tmp_path / "out.grating", Grating(2, 2).to_image_data())
    with Image.open(path) as img:
        assert img.format == "PNG"

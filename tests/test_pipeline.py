"""Tests for single-image encode/decode."""

import numpy as np
import pytest
from engines import base83
from engines.pipeline import components, decode, decode_payload, encode, encode_payload
from models.errors import ConfigurationError, EncodingInvariantError, HashDecodeError
from utils.constants import BASE83_ALPHABET
from utils.test_images import (
    generate_colored_checkerboard, generate_gradient, generate_horizontal_split,
    generate_noise, generate_solid,
)

AC_ZERO_CODE = 9 * 19 * 19 + 9 * 19 + 9


def test_hash_length_for_all_components():
    image = generate_noise(16, 12)
    for cx in range(1, 10):
        for cy in range(1, 10):
            blurhash = encode(image, cx, cy)
            assert len(blurhash) == 4 + 2 * cx * cy
            assert components(blurhash) == (cx, cy)


def test_each_component_adds_two_characters():
    image = generate_gradient(32, 24)
    lengths = [len(encode(image, cx, 1)) for cx in range(1, 10)]
    assert np.all(np.diff(lengths) == 2)


def test_hash_uses_only_alphabet():
    for image in (generate_noise(), generate_colored_checkerboard(64), generate_gradient()):
        blurhash = encode(image, 9, 9)
        assert set(blurhash) <= set(BASE83_ALPHABET)


def test_encoding_is_deterministic():
    image = generate_noise(40, 30, seed=5)
    assert encode(image, 4, 3) == encode(image.copy(), 4, 3)


def test_single_pixel_single_component():
    """1x1 red pixel: size flag, zero max-AC digit, 4 DC digits."""
    image = np.array([[[255, 0, 0]]], dtype=np.uint8)
    blurhash = encode(image, 1, 1)
    assert blurhash == "00TI:j"
    assert base83.decode(blurhash[2:6], 4) == 255 << 16


def test_solid_color_end_to_end():
    color = (200, 120, 40)
    image = generate_solid(128, 96, color)
    blurhash = encode(image, 4, 3)
    payload = decode_payload(blurhash)
    
    assert payload.components == (4, 3)
    assert payload.dc == (color[0] << 16) + (color[1] << 8) + color[2]
    # Even-frequency cells see no variation at all
    for j, i in [(0, 2), (2, 0), (2, 2)]:
        assert payload.ac[j * 4 + i - 1] == AC_ZERO_CODE
    
    preview = decode(blurhash, 32, 24)
    assert np.abs(preview.astype(int) - np.array(color)).max() <= 12


def test_decode_preserves_layout():
    image = generate_horizontal_split(64, 48)
    preview = decode(encode(image, 4, 3), 32, 24)
    left, right = preview[:, :16].astype(float), preview[:, 16:].astype(float)
    assert left[:, :, 0].mean() > right[:, :, 0].mean()
    assert left[:, :, 2].mean() < right[:, :, 2].mean()


def test_decode_output_shape_and_punch():
    blurhash = encode(generate_gradient(), 4, 3)
    preview = decode(blurhash, 20, 10)
    assert preview.shape == (10, 20, 3)
    assert preview.dtype == np.uint8
    flat = decode(blurhash, 20, 10, punch=0.0)
    assert np.all(flat == flat[0, 0])


def test_payload_round_trip():
    blurhash = encode(generate_noise(), 5, 4)
    assert encode_payload(decode_payload(blurhash)) == blurhash


def test_reference_hash_parses():
    payload = decode_payload("LEHV6nWB2yk8pyo0adR*.7kCMdnj")
    assert payload.components == (4, 3)
    assert len(payload.ac) == 11


def test_rgba_alpha_is_ignored():
    rgb = generate_noise(20, 20)
    alpha = np.full((20, 20, 1), 17, dtype=np.uint8)
    assert encode(np.concatenate([rgb, alpha], axis=2), 3, 3) == encode(rgb, 3, 3)


def test_invalid_components_rejected_before_pixels():
    bogus = np.zeros((0, 0), dtype=np.float32)
    for cx, cy in [(0, 1), (1, 0), (10, 3), (4, 10)]:
        with pytest.raises(ConfigurationError):
            encode(bogus, cx, cy)


def test_invalid_pixels_rejected():
    with pytest.raises(EncodingInvariantError):
        encode(np.zeros((4, 4), dtype=np.uint8))
    with pytest.raises(EncodingInvariantError):
        encode(np.zeros((4, 4, 3), dtype=np.float64))
    with pytest.raises(EncodingInvariantError):
        encode(np.zeros((0, 4, 3), dtype=np.uint8))


@pytest.mark.parametrize("blurhash", [
    "",
    "00TI:",
    "00TI:jAB",
    "L!HV6nWB2yk8pyo0adR*.7kCMdnj",
    "LEHV6nWB2yk8pyo0adR*.7kCMdn",
])
def test_decode_rejects_malformed(blurhash):
    with pytest.raises(HashDecodeError):
        decode(blurhash, 8, 8)


def test_decode_rejects_bad_size():
    with pytest.raises(ValueError):
        decode("00TI:j", 0, 4)

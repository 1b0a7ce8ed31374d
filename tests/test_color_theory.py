"""Color family, tone and hex codec tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color_theory import (
    BLACK,
    RGB,
    classify_family,
    classify_tone,
    color_name,
    hex_to_rgb,
    rgb_to_hex,
)
from models.taxonomy import ColorFamily, ToneGroup


@pytest.mark.parametrize(
    "hex_value, family",
    [
        ("FFFFFF", ColorFamily.WHITE),
        ("000000", ColorFamily.BLACK),
        ("808080", ColorFamily.GRAY),
        ("E8D8C0", ColorFamily.BEIGE),
        ("8B4513", ColorFamily.BROWN),
        ("FF0000", ColorFamily.RED),
        ("FF7F50", ColorFamily.PINK),
        ("FF8C00", ColorFamily.ORANGE),
        ("FFFF00", ColorFamily.YELLOW),
        ("228B22", ColorFamily.GREEN),
        ("008080", ColorFamily.TEAL),
        ("3D6AA2", ColorFamily.BLUE),
        ("1F3A93", ColorFamily.NAVY),
        ("800080", ColorFamily.PURPLE),
        ("D2B48C", ColorFamily.ORANGE),
        ("F2A6B3", ColorFamily.RED),
    ],
)
def test_classify_family_buckets(hex_value: str, family: ColorFamily) -> None:
    assert classify_family(hex_to_rgb(hex_value)) is family


def test_classify_family_absent_color_is_unknown() -> None:
    assert classify_family(None) is ColorFamily.UNKNOWN


def test_neutral_brightness_boundaries_fall_to_gray() -> None:
    """Brightness exactly at 0.92 or 0.14 is neither white nor black."""

    assert classify_family(RGB(0.92, 0.92, 0.92)) is ColorFamily.GRAY
    assert classify_family(RGB(0.14, 0.14, 0.14)) is ColorFamily.GRAY
    assert classify_family(RGB(0.93, 0.93, 0.93)) is ColorFamily.WHITE
    assert classify_family(RGB(0.13, 0.13, 0.13)) is ColorFamily.BLACK


def test_classify_tone() -> None:
    assert classify_tone(hex_to_rgb("000000")) is ToneGroup.DARK
    assert classify_tone(hex_to_rgb("FF0000")) is ToneGroup.DARK
    assert classify_tone(hex_to_rgb("F2C94C")) is ToneGroup.BRIGHT
    assert classify_tone(hex_to_rgb("D2B48C")) is ToneGroup.NEUTRAL
    assert classify_tone(hex_to_rgb("FFFFFF")) is ToneGroup.NEUTRAL
    assert classify_tone(None) is ToneGroup.NEUTRAL


def test_color_name_thresholds() -> None:
    assert color_name(hex_to_rgb("FFFFFF")) == "white"
    assert color_name(hex_to_rgb("000000")) == "black"
    assert color_name(hex_to_rgb("F2A6B3")) == "red"
    assert color_name(hex_to_rgb("3D6AA2")) == "blue"
    assert color_name(hex_to_rgb("1F3A93")) == "neutral"
    assert color_name(None) == ""


def test_hex_decoding_forms() -> None:
    assert hex_to_rgb("#1f3a93") == hex_to_rgb("1F3A93")
    assert hex_to_rgb("FFF") == RGB(1.0, 1.0, 1.0)
    assert hex_to_rgb("F80") == hex_to_rgb("FF8800")
    with_alpha = hex_to_rgb("80FF0000")
    assert with_alpha.red == 1.0 and with_alpha.green == 0.0
    assert with_alpha.alpha == pytest.approx(128 / 255)


@pytest.mark.parametrize("raw", ["", "zzz", "12345", "GG0000", "#"])
def test_malformed_hex_decodes_to_opaque_black(raw: str) -> None:
    assert hex_to_rgb(raw) == BLACK


def test_rgb_to_hex_rounds_to_nearest() -> None:
    assert rgb_to_hex(RGB(0.5, 0.5, 0.5)) == "808080"
    assert rgb_to_hex(RGB(1.0, 0.0, 0.0, 0.2)) == "FF0000"


@pytest.mark.parametrize(
    "color",
    [RGB(0.08, 0.17, 0.36), RGB(0.9, 0.84, 0.72), RGB(0.0, 1.0, 0.333), RGB(0.501, 0.499, 0.25)],
)
def test_hex_round_trip_within_one_step(color: RGB) -> None:
    decoded = hex_to_rgb(rgb_to_hex(color))
    for original, restored in zip(color[:3], decoded[:3]):
        assert abs(original - restored) <= 1 / 255

from __future__ import annotations

from skyterm.core.projection import ViewProjection
from skyterm.core.types import ViewState
from skyterm.rendering.braille import BRAILLE_BASE, BrailleCanvas, render_stars_braille
from skyterm.universe.bodies import Star

VIEW = ViewState(center_alt=45.0, center_az=180.0, fov=60.0)


def test_dot_layout():
    bc = BrailleCanvas(2, 1)
    assert (bc.pixel_width, bc.pixel_height) == (4, 4)
    bc.set_pixel(0, 0)
    assert bc.char_at(0, 0) == "⠁"
    bc.set_pixel(1, 3)
    assert bc.char_at(0, 0) == "⢁"
    bc.set_pixel(2, 1)
    assert bc.char_at(1, 0) == "⠂"


def test_out_of_range_pixels_are_ignored():
    bc = BrailleCanvas(1, 1)
    bc.set_pixel(-1, 0)
    bc.set_pixel(2, 0)
    bc.set_pixel(0, 4)
    assert bc.plain() == chr(BRAILLE_BASE)


def test_clear():
    bc = BrailleCanvas(3, 2)
    bc.set_pixel(3, 5)
    bc.clear()
    assert set(bc.plain().replace("\n", "")) == {chr(BRAILLE_BASE)}


def _lit_dots(bc):
    return sum(bin(b).count("1") for row in bc.bits for b in row)


def test_star_sizes():
    proj = ViewProjection(VIEW, 40, 12)
    for mag, dots in ((0.5, 9), (2.0, 4), (4.0, 1)):
        bc = BrailleCanvas(40, 12)
        star = Star(name="S", magnitude=mag, altitude=45.0, azimuth=180.0)
        assert render_stars_braille(bc, [star], proj, 6.0) == 1
        assert _lit_dots(bc) == dots


def test_magnitude_limit_and_fov():
    proj = ViewProjection(VIEW, 40, 12)
    bc = BrailleCanvas(40, 12)
    faint = Star(name="Faint", magnitude=5.5, altitude=45.0, azimuth=180.0)
    behind = Star(name="Behind", magnitude=0.0, altitude=45.0, azimuth=0.0)
    assert render_stars_braille(bc, [faint, behind], proj, 5.0) == 0
    assert _lit_dots(bc) == 0


def test_to_text_shape():
    bc = BrailleCanvas(5, 3)
    text = bc.to_text()
    assert text.plain.count("\n") == 2
    assert all(len(line) == 5 for line in text.plain.split("\n"))

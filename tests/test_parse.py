import pytest
from coloraide import Color

from color_tools.errors import InvalidColorFormat
from color_tools.model import CanonicalColor
from color_tools.parse import parse


def test_hex_forms():
    assert parse("#ff0000").rgb == (255, 0, 0)
    assert parse("#1af") == parse("#11aaff")
    assert parse("#ABCDEF") == parse("#abcdef")
    c = parse("#11223380")
    assert c.rgb == (0x11, 0x22, 0x33)
    assert c.a == pytest.approx(128 / 255)


def test_hex_full_alpha_is_opaque():
    assert parse("#112233ff").a is None


def test_rgb_and_rgba():
    assert parse("rgb(255, 87, 51)") == CanonicalColor(255, 87, 51)
    assert parse("  RGB( 1 ,2,  3 )  ") == CanonicalColor(1, 2, 3)
    assert parse("rgba(10, 20, 30, 0.25)") == CanonicalColor(10, 20, 30, 0.25)


def test_hsl_and_hsla():
    assert parse("hsl(0, 100%, 50%)").rgb == (255, 0, 0)
    assert parse("hsl(120, 100%, 25%)").rgb == (0, 128, 0)
    assert parse("hsla(240, 100%, 50%, 0.5)") == CanonicalColor(0, 0, 255, 0.5)


def test_hsl_hue_is_taken_mod_360():
    assert parse("hsl(480, 100%, 50%)") == parse("hsl(120, 100%, 50%)")
    assert parse("hsl(-60, 100%, 50%)") == parse("hsl(300, 100%, 50%)")


@pytest.mark.parametrize(
    "css", ["hsl(17 80% 40%)", "hsl(200 35% 62%)", "hsl(310 90% 15%)", "hsl(45 100% 70%)"]
)
def test_hsl_matches_coloraide(css):
    h, s, l = css[4:-1].replace("%", "").split()
    ours = parse(f"hsl({h}, {s}%, {l}%)").rgb
    ref = [round(v * 255) for v in Color(css).convert("srgb").coords()]
    assert all(abs(a - b) <= 1 for a, b in zip(ours, ref))


def test_named_colors_case_insensitive():
    assert parse("Red").rgb == (255, 0, 0)
    assert parse(" LAVENDER ").rgb == (230, 230, 250)


@pytest.mark.parametrize(
    "bad",
    [
        "not-a-color",
        "",
        "#abcd",
        "#gg0000",
        "rgb(256, 0, 0)",
        "rgb(-1, 0, 0)",
        "rgb(1.5, 0, 0)",
        "rgb(1, 2)",
        "rgb(1, 2, 3, 0.5)",
        "rgba(1, 2, 3)",
        "rgba(1, 2, 3, 1.5)",
        "hsl(0, 101%, 50%)",
        "hsl(0, 50, 50)",
        "hsl(0, 50%, -1%)",
    ],
)
def test_invalid_inputs(bad):
    with pytest.raises(InvalidColorFormat):
        parse(bad)


def test_non_string_rejected():
    with pytest.raises(InvalidColorFormat):
        parse(0xFF0000)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "huge",
    [
        "hsl(" + "9" * 400 + ", 50%, 50%)",
        "hsl(0, " + "9" * 400 + "%, 50%)",
        "hsla(0, 50%, 50%, " + "9" * 400 + ")",
    ],
)
def test_overflowing_numbers_are_format_errors(huge):
    with pytest.raises(InvalidColorFormat):
        parse(huge)


def test_only_ascii_digits():
    with pytest.raises(InvalidColorFormat):
        parse("rgb(١٢٣, 0, 0)")

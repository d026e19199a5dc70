import pytest
from coloraide import Color

from color_tools.contrast import analyze_contrast, contrast_ratio, relative_luminance
from color_tools.parse import parse

SAMPLES = ["#000000", "#ffffff", "#777777", "#767676", "#ff5733", "#3498db", "navy", "#0a0"]


def test_black_white_is_21():
    assert contrast_ratio(parse("#000000"), parse("#ffffff")) == pytest.approx(21.0, abs=1e-2)


def test_same_color_is_1():
    c = parse("#3498db")
    assert contrast_ratio(c, c) == pytest.approx(1.0)


def test_symmetry():
    for a in SAMPLES:
        for b in SAMPLES:
            assert contrast_ratio(parse(a), parse(b)) == contrast_ratio(parse(b), parse(a))


def test_luminance_bounds():
    assert relative_luminance(parse("#000")) == 0.0
    assert relative_luminance(parse("#fff")) == pytest.approx(1.0)


@pytest.mark.parametrize("fg", SAMPLES[2:])
def test_matches_coloraide(fg):
    ours = contrast_ratio(parse(fg), parse("#ffffff"))
    ref = Color(fg).contrast(Color("#ffffff"))
    assert ours == pytest.approx(ref, abs=1e-2)


def test_wcag_flags_around_aa_threshold():
    fail = analyze_contrast(parse("#777777"), parse("#ffffff"))
    assert fail.formatted == "4.48:1"
    assert not fail.aa_normal and fail.aa_large
    assert not fail.aaa_normal and not fail.aaa_large

    ok = analyze_contrast(parse("#767676"), parse("#ffffff"))
    assert ok.formatted == "4.54:1"
    assert ok.aa_normal and ok.aa_large and ok.aaa_large
    assert not ok.aaa_normal


def test_report_dict():
    d = analyze_contrast(parse("black"), parse("white")).to_dict()
    assert d == {
        "ratio": 21.0,
        "formatted": "21.00:1",
        "aa": {"normal": True, "large": True},
        "aaa": {"normal": True, "large": True},
    }


def test_flags_agree_with_reported_ratio():
    report = analyze_contrast(parse("rgb(62, 135, 0)"), parse("#ffffff"))
    d = report.to_dict()
    assert d["ratio"] == 4.5
    assert d["formatted"] == "4.50:1"
    assert d["aa"]["normal"] and d["aaa"]["large"]
    assert report.ratio < 4.5

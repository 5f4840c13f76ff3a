import logging

import pytest

from perceptual import (
    OKLCH,
    InvalidFormatError,
    LengthMismatchError,
    WCAGLevel,
    batch_validate_contrast,
    passes_wcag_aa,
    validate_contrast,
    validate_pairs,
)


def test_validate_contrast_black_on_white():
    result = validate_contrast("#000000", "#ffffff")
    assert abs(result.wcag_ratio - 21.0) < 0.01
    assert result.apca_lc == pytest.approx(106.04, abs=0.05)
    assert result.wcag_normal_level is WCAGLevel.AAA
    assert result.wcag_large_level is WCAGLevel.AAA
    assert result.apca_body_pass and result.apca_large_pass
    assert result.passes_aa


def test_validate_contrast_gray_fails_normal_text_only():
    result = validate_contrast("#777777", "#ffffff")
    assert result.wcag_normal_level is None
    assert result.wcag_large_level is WCAGLevel.AA
    assert not result.passes_aa
    assert result.apca_body_pass


def test_validate_pairs_reports_failures(caplog):
    caplog.set_level(logging.DEBUG, logger="perceptual.a11y")
    failures = validate_pairs(
        [
            ("#000", "#fff", "body"),
            ("#777777", "#ffffff", "muted"),
            ("blue", "#fff", "bad token"),
        ]
    )
    assert len(failures) == 2
    assert failures[0].startswith("[contrast-fail] muted: ratio=4.48 < 4.5")
    assert failures[1].startswith("[format-error] bad token:")
    assert "validated 3 contrast pairs, 2 failing" in caplog.text


def test_validate_pairs_large_text_threshold():
    failures = validate_pairs([("#777777", "#ffffff", "muted")], is_large_text=True)
    assert failures == []


def test_validate_pairs_aaa():
    failures = validate_pairs([("#777777", "#ffffff", "muted")], level="AAA", is_large_text=True)
    assert len(failures) == 1
    assert "< 4.5" in failures[0]


def test_validate_pairs_unknown_level():
    with pytest.raises(InvalidFormatError):
        validate_pairs([], level="AAAA")


def test_validate_contrast_accepts_oklch_tokens():
    text = OKLCH.from_hex("#000000")
    surface = OKLCH.from_hex("#ffffff")
    result = validate_contrast(text, surface)
    assert result == validate_contrast("#000000", "#ffffff")


def test_out_of_gamut_token_is_mapped_before_measuring():
    vivid = OKLCH(0.7, 0.4, 150.0)
    expected = validate_contrast(vivid.map_to_gamut().to_color(), "#ffffff")
    assert validate_contrast(vivid, "#ffffff") == expected


def test_batch_validate_contrast():
    fgs = ["#000000", OKLCH.from_hex("#888888"), (255, 255, 255)]
    bgs = ["#ffffff", "#ffffff", "#000000"]
    results = batch_validate_contrast(fgs, bgs)
    assert results == [validate_contrast(f, b) for f, b in zip(fgs, bgs)]
    assert [r.passes_aa for r in results] == [True, False, True]


def test_batch_validate_contrast_length_mismatch():
    with pytest.raises(LengthMismatchError):
        batch_validate_contrast(["#000", "#fff", "#777"], ["#fff", "#000"])


def test_passes_wcag_aa():
    assert passes_wcag_aa("#000000", "#ffffff")
    assert not passes_wcag_aa("#777777", "#ffffff")
    assert passes_wcag_aa(OKLCH.from_hex("#ffffff"), OKLCH.from_hex("#000000"))


def test_validate_pairs_accepts_oklch_tokens():
    failures = validate_pairs([(OKLCH.from_hex("#888888"), OKLCH.from_hex("#ffffff"), "muted")])
    assert len(failures) == 1
    assert failures[0].startswith("[contrast-fail] muted:")

import pytest

from perceptual import (
    OKLCH,
    OutOfRangeError,
    UIState,
    batch_derive_tokens,
    derive_state_tokens,
    derive_token_for_state,
)
from perceptual.tokens import DERIVABLE_STATES


BASE = OKLCH(0.6, 0.1, 250.0)


def test_hover_token_shifts():
    token = derive_token_for_state(BASE, UIState.HOVERED, gamut_map=False)
    assert token.l == pytest.approx(0.65)
    assert token.c == pytest.approx(0.12)
    assert token.h == BASE.h


def test_active_token_darkens():
    token = derive_token_for_state(BASE, UIState.ACTIVE, gamut_map=False)
    assert token.l == pytest.approx(0.52)
    assert token.c == pytest.approx(0.13)


def test_disabled_token_is_washed_out():
    token = derive_token_for_state(BASE, UIState.DISABLED, gamut_map=False)
    assert token.l == pytest.approx(0.8)
    assert token.c == pytest.approx(0.0, abs=1e-12)


def test_idle_token_is_base():
    assert derive_token_for_state(BASE, UIState.IDLE, gamut_map=False) == BASE


def test_chroma_is_bounded():
    vivid = OKLCH(0.6, 0.39, 30.0)
    assert derive_token_for_state(vivid, UIState.ERROR, gamut_map=False).c == pytest.approx(0.4)
    muted = OKLCH(0.6, 0.02, 30.0)
    assert derive_token_for_state(muted, UIState.DISABLED, gamut_map=False).c == 0.0


def test_lightness_is_clamped():
    light = OKLCH(0.95, 0.05, 100.0)
    assert derive_token_for_state(light, UIState.DISABLED, gamut_map=False).l == 1.0


def test_state_token_set_is_representable():
    tokens = derive_state_tokens(OKLCH(0.7, 0.3, 150.0))
    assert set(tokens) == set(DERIVABLE_STATES)
    for state, token in tokens.items():
        assert token.in_gamut(), state
        assert token.to_color() is not None
        assert token.h == pytest.approx(150.0)


def test_state_tokens_accept_ranks():
    tokens = derive_state_tokens(BASE, [1, UIState.FOCUSED])
    assert list(tokens) == [UIState.HOVERED, UIState.FOCUSED]


def test_unknown_state_rejected():
    with pytest.raises(OutOfRangeError):
        derive_token_for_state(BASE, 42)
    with pytest.raises(OutOfRangeError):
        derive_state_tokens(BASE, [UIState.IDLE, 42])


def test_batch_derive_tokens_matches_single_derivation():
    bases = [BASE, OKLCH(0.7, 0.3, 150.0), OKLCH(0.2, 0.05, 30.0)]
    batch = batch_derive_tokens(bases)
    assert batch == [derive_state_tokens(b) for b in bases]


def test_batch_derive_tokens_threaded():
    bases = [OKLCH(i / 100.0, 0.1, i * 3.0) for i in range(100)]
    sequential = batch_derive_tokens(bases, [UIState.HOVERED], max_workers=1)
    threaded = batch_derive_tokens(bases, [UIState.HOVERED], max_workers=4)
    assert threaded == sequential
    assert list(threaded[0]) == [UIState.HOVERED]


def test_batch_derive_tokens_validates_states_first():
    with pytest.raises(OutOfRangeError):
        batch_derive_tokens([BASE], [UIState.IDLE, 42])
    assert batch_derive_tokens([]) == []

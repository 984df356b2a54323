"""
Unit tests for the easing curves
"""

import pytest
import pytweening

import pytickanim.easing as easing


@pytest.mark.parametrize('x', [0, 0.1, 0.25, 0.5, 0.75, 0.9, 1])
def test_linear_is_identity(x):
    """linear returns its input unchanged"""
    assert easing.linear(x) == x


@pytest.mark.parametrize('ease', [
    easing.linear,
    easing.smoothstep,
    easing.smootheststep,
    easing.squeeze,
    easing.power(2),
    easing.reverse(easing.power(3)),
])
def test_proper_easings_hit_endpoints(ease):
    """Built-in curves start at 0 and end at 1"""
    assert ease(0) == pytest.approx(0)
    assert ease(1) == pytest.approx(1)


def test_smoothstep_is_symmetric():
    """smoothstep(x) + smoothstep(1 - x) == 1"""
    for x in (0.1, 0.3, 0.45):
        assert easing.smoothstep(x) + easing.smoothstep(1 - x) == pytest.approx(1)


def test_squeeze_holds_at_ends():
    """squeeze is flat for the padding and linear in the middle"""
    assert easing.squeeze(0.1) == 0
    assert easing.squeeze(0.9) == 1
    assert easing.squeeze(0.5) == pytest.approx(0.5)
    assert easing.squeeze(0.5, amt=0.25) == pytest.approx(0.5)


def test_power_and_reverse():
    """power is an ease-in and reverse turns it into the ease-out"""
    quad = easing.power(2)
    assert quad(0.5) == pytest.approx(0.25)
    assert easing.reverse(quad)(0.5) == pytest.approx(0.75)


def test_power_rejects_non_positive_exponent():
    with pytest.raises(ValueError):
        easing.power(0)


def test_named_resolves_pytweening_curves():
    """named looks curves up in pytweening"""
    assert easing.named('easeOutElastic') is pytweening.easeOutElastic
    assert easing.named('easeOutQuad')(0.5) == pytest.approx(0.75)
    assert easing.named('linear') is easing.linear


@pytest.mark.parametrize('name', ['nope', 'getLine', 'easeNowhere'])
def test_named_rejects_unknown(name):
    with pytest.raises(ValueError):
        easing.named(name)


def test_back_curve_overshoots():
    """Overshooting curves are valid easings"""
    assert easing.named('easeOutBack')(0.8) > 1


def test_easing_interface_is_abstract():
    """Easing documents the contract; subclasses provide __call__"""
    class Half(easing.Easing):
        def __call__(self, x):
            return x / 2

    with pytest.raises(NotImplementedError):
        easing.Easing()(0.5)
    assert Half()(0.5) == pytest.approx(0.25)

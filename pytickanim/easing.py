"""Describes what an easing is for the purpose of this library and provides
a handful of implementations. The full family of ease-in / ease-out curves,
including the elastic and bounce curves, is available through named(), which
looks them up in the pytweening library.
"""

import pytweening
import pytypeutils as tus

class Easing:
    """The interface for easings. Anything that accepts an easing works for
    any callable object that acts like an Easing, so plain functions are
    the usual way to provide one."""

    def __call__(self, x: float) -> float:
        """Maps the "uneased" percentage x to an eased output.

        An easing must be deterministic and free of side effects, and only
        needs to be defined for x in [0, 1]. The output is not bounded: a
        curve may overshoot below 0 or above 1 (e.g. back or elastic curves)
        and consumers of animation values must accept that.

        Args:
            x (float): the raw percentage, in [0, 1]

        Returns:
            eased (float): the eased value
        """
        raise NotImplementedError

def linear(x): # pylint: disable=invalid-name
    """The identity easing, and the default for animations."""
    return x

def smoothstep(x): # pylint: disable=invalid-name
    """Symmetric cubic curve with a flat start and end."""
    return x * x * (3.0 - 2.0 * x)

def smootheststep(x): # pylint: disable=invalid-name
    """Symmetric septic curve whose first three derivatives vanish at both
    ends."""
    return x * x * x * x * (35 + x * (-84 + x * (70 + x * -20)))

def squeeze(x, amt=0.2): # pylint: disable=invalid-name
    """Holds at 0 for the first amt of the input and at 1 for the last amt,
    moving linearly in between.
    """
    if x <= amt:
        return 0
    if x >= 1 - amt:
        return 1
    return (x - amt) / (1 - amt * 2)

def power(exponent: float) -> Easing:
    """Returns the ease-in curve f(x) = x ** exponent.

    Args:
        exponent (float): must be positive; 2 is quadratic, 3 cubic, etc.

    Returns:
        the easing
    """
    tus.check(exponent=(exponent, (int, float)))
    if exponent <= 0:
        raise ValueError(f'exponent={exponent} must be positive')

    def _power(x):
        return x ** exponent
    return _power

def reverse(ease: Easing) -> Easing:
    """Mirrors the easing through the point (0.5, 0.5), so an ease-in curve
    becomes the matching ease-out curve: g(x) = 1 - f(1 - x)
    """
    tus.check_callable(ease=ease)

    def _reversed(x):
        return 1 - ease(1 - x)
    return _reversed

def named(name: str) -> Easing:
    """Looks up a pytweening curve by its name, such as 'easeOutElastic',
    'easeInOutBack' or 'easeOutBounce'. 'linear' is also accepted.

    Args:
        name (str): the pytweening function name

    Returns:
        the easing

    Raises:
        ValueError: if pytweening has no curve with that name
    """
    tus.check(name=(name, str))
    if name == 'linear':
        return linear
    if name.startswith('ease'):
        ease = getattr(pytweening, name, None)
        if callable(ease):
            return ease
    raise ValueError(f'unknown easing: {name}')

"""Animation types decide how the raw progress of an animation is folded
into [0, 1] before the easing is applied. Every type is total over the real
numbers: out-of-range progress is clamped, wrapped or reflected, never
rejected.

Types are stateless, so the instances returned from once(), loop() and
ping_pong() are shared between animations.
"""

import math
import pytypeutils as tus

class AnimationType:
    """The interface for animation types. A type computes the visible value
    of an animation from a read-only view of it.
    """

    def fold(self, progress: float) -> float:
        """Maps any raw progress to the [0, 1] input of the easing"""
        raise NotImplementedError

    def value_of(self, snapshot) -> float:
        """Computes the value that the given animation should currently
        show. The snapshot is anything with progress(), speed(), ease() and
        paused() accessors, typically the Animation itself.

        By default this folds the progress and applies the easing to it,
        which is all the built-in types need.

        Args:
            snapshot (Animation): the animation to compute the value of

        Returns:
            value (float): the eased value, not necessarily within [0, 1]
        """
        return snapshot.ease()(self.fold(snapshot.progress()))

    def __repr__(self):
        return f'{type(self).__name__}()'

class Once(AnimationType):
    """Runs the animation a single time. Progress is clamped to [0, 1], so
    the value plateaus at ease(0) below the range and ease(1) above it.
    """
    def fold(self, progress):
        return min(max(progress, 0.0), 1.0)

class Loop(AnimationType):
    """Repeats the animation forever by wrapping progress modulo 1, so 1.25
    shows the same value as 0.25 and -0.25 the same as 0.75.
    """
    def fold(self, progress):
        folded = math.fmod(progress, 1.0)
        return folded + 1.0 if folded < 0 else folded

class PingPong(AnimationType):
    """Plays the animation forwards and then backwards, reflecting progress
    with a triangle wave of period 2: [0, 1) runs forwards and [1, 2) maps
    to 2 - progress.
    """
    def fold(self, progress):
        folded = math.fmod(progress, 2.0)
        if folded < 0:
            folded += 2.0
        return 2.0 - folded if folded > 1.0 else folded

_ONCE = Once()
_LOOP = Loop()
_PING_PONG = PingPong()

_BY_NAME = {
    'once': _ONCE,
    'loop': _LOOP,
    'ping_pong': _PING_PONG,
    'pingpong': _PING_PONG,
}

def once() -> Once:
    """The default type: run once and hold the end value"""
    return _ONCE

def loop() -> Loop:
    """Wrap around and repeat"""
    return _LOOP

def ping_pong() -> PingPong:
    """Bounce back and forth"""
    return _PING_PONG

def by_name(name: str) -> AnimationType:
    """Resolves 'once', 'loop' or 'ping_pong' (case insensitive) to the
    corresponding shared type instance.

    Raises:
        ValueError: if the name is not one of the built-in types
    """
    tus.check(name=(name, str))
    result = _BY_NAME.get(name.lower())
    if result is None:
        raise ValueError(
            f'unknown animation type: {name} (expected one of '
            + f'{sorted(_BY_NAME)})')
    return result

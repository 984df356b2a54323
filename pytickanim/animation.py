"""The mutable animation state. An animation holds a raw progress, the value
that its type and easing derive from that progress, and a pause flag. It does
not own a clock: the host advances it, usually once per frame, and reads the
value back.

```
    import pytickanim.animation as panim
    import pytickanim.easing as easing

    anim = panim.animation(easing.smoothstep, speed=0.05)
    while not anim.finished():
        anim.tick()
        draw(anim.value())
```

The setters return the animation so calls can be chained, and each accessor
doubles as its setter when given an argument, e.g. anim.progress() reads the
progress and anim.progress(0.5) sets it.

An animation is not thread-safe; hosts that share one across threads must
hold a lock around reading progress and setting it.
"""

import logging
import typing
import pytypeutils as tus
import pytickanim.anim_types as atypes
from pytickanim.easing import Easing, linear

DEFAULT_SPEED = 0.1
"""The suggested per-tick progress increment when none is given"""

logger = logging.getLogger('pytickanim.animation')

class Animation:
    """A value that is eased between 0 and 1 as its progress is advanced.

    The paused flag is advisory. progress(p) always updates the animation
    regardless of it; it is the driver's responsibility to check paused()
    before advancing, which tick() does on its behalf.

    Attributes:
        _ease (Easing): the easing curve, fixed for the lifetime
        _type (AnimationType): how progress is folded before easing, fixed
        _speed (float): the suggested progress increment per tick, fixed
        _progress (float): the raw progress last set
        _value (float): the value computed for _progress, unless it was
            overwritten through value(v)
        _paused (bool): whether the driver should skip ticks
    """
    def __init__(self, ease: Easing,
                 anim_type: atypes.AnimationType, speed: float):
        self._ease = ease
        self._type = anim_type
        self._speed = speed
        self._progress = 0.0
        self._value = 0.0
        self._paused = False

    def value(self, value: typing.Optional[float] = None
              ) -> typing.Union[float, 'Animation']:
        """With no arguments, returns the current value. With a value,
        overwrites the cached value without touching progress and returns
        this animation. The overwrite only lasts until progress is next set.
        """
        if value is None:
            return self._value
        self._value = value
        return self

    def progress(self, progress: typing.Optional[float] = None
                 ) -> typing.Union[float, 'Animation']:
        """With no arguments, returns the raw progress. With a progress,
        stores it, recomputes the value from the type and easing and returns
        this animation.
        """
        if progress is None:
            return self._progress
        self._progress = progress
        self._value = self._type.value_of(self)
        return self

    def paused(self, state: typing.Optional[bool] = None
               ) -> typing.Union[bool, 'Animation']:
        """With no arguments, returns True if the driver should not advance
        this animation. With a state, sets the flag and returns this
        animation. Setting the flag does not change progress or value.
        """
        if state is None:
            return self._paused
        if state != self._paused:
            logger.debug('%s %s', 'Paused' if state else 'Resumed', self)
        self._paused = state
        return self

    def remaining(self) -> float:
        """Returns 1 - value()"""
        return 1 - self._value

    def speed(self) -> float:
        """Returns the suggested amount to advance progress per tick"""
        return self._speed

    def type(self) -> atypes.AnimationType:
        """Returns how this animation folds out-of-range progress"""
        return self._type

    def ease(self) -> Easing:
        """Returns the easing curve of this animation"""
        return self._ease

    def tick(self, delta: typing.Optional[float] = None) -> 'Animation':
        """Advances progress by delta, or by speed() if delta is None,
        unless the animation is paused.
        """
        if self._paused:
            return self
        if delta is None:
            delta = self._speed
        return self.progress(self._progress + delta)

    def finished(self) -> bool:
        """Returns True if this is a run-once animation whose progress has
        reached the end it is moving toward: 1 for a non-negative speed and
        0 for a negative one. Looping and ping-pong animations never finish.
        """
        if not isinstance(self._type, atypes.Once):
            return False
        if self._speed < 0:
            return self._progress <= 0
        return self._progress >= 1

    def reset(self, progress: float = 0) -> 'Animation':
        """Moves progress back to the given value, 0 by default"""
        logger.debug('Reset %s to progress=%s', self, progress)
        return self.progress(progress)

    def __repr__(self):
        return (f'Animation(type={self._type!r}, speed={self._speed}, '
                + f'progress={self._progress}, value={self._value}, '
                + f'paused={self._paused})')

def animation(ease: Easing = linear,
              type: typing.Optional[atypes.AnimationType] = None, # pylint: disable=redefined-builtin
              paused: bool = False,
              speed: float = DEFAULT_SPEED,
              progress: float = 0) -> Animation:
    """Creates an animation. The value is computed for the starting progress
    before this returns.

    Args:
        ease (Easing): the easing curve, linear by default
        type (AnimationType, optional): how progress outside [0, 1] is
            handled, anim_types.once() by default
        paused (bool): the starting pause state
        speed (float): the suggested progress increment per tick
        progress (float): the starting progress

    Returns:
        the new animation
    """
    if type is None:
        type = atypes.once()
    tus.check_callable(ease=ease)
    tus.check(
        type=(type, atypes.AnimationType),
        paused=(paused, bool),
        speed=(speed, (int, float)),
        progress=(progress, (int, float))
    )
    if isinstance(speed, bool):
        raise ValueError(f'expected speed is a number but got bool {speed}')
    if isinstance(progress, bool):
        raise ValueError(
            f'expected progress is a number but got bool {progress}')

    result = Animation(ease, type, speed).paused(paused).progress(progress)
    logger.debug('Created %s', result)
    return result

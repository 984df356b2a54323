"""A red square bouncing back and forth across the screen, saved as a gif.
The loop below is the host: it owns the clock, advances the animation once
per frame and draws whatever value it reads back."""

import typing
import os
import PIL.Image
import pytickanim.animation as panim
import pytickanim.anim_types as atypes
import pytickanim.easing as easing

def render(frame_size: typing.Tuple[int, int], value: float) -> PIL.Image:
    box_size = int(frame_size[1] * 0.2)

    box_x = int(value * (frame_size[0] - box_size))
    box_y = int((frame_size[1] / 2) - (box_size / 2))

    img = PIL.Image.new('RGB', frame_size, 'black')
    box = PIL.Image.new('RGB', (box_size, box_size), 'red')
    img.paste(box, (box_x, box_y))
    return img

def _main():
    os.makedirs('out/examples', exist_ok=True)

    fps = 30
    anim = panim.animation(
        easing.named('easeInOutCubic'), atypes.ping_pong(), speed=1 / fps)

    frames = []
    for _ in range(4 * fps):
        frames.append(render((320, 240), anim.value()))
        anim.tick()

    frames[0].save(
        'out/examples/bouncing_square.gif', save_all=True,
        append_images=frames[1:], duration=int(1000 / fps), loop=0)

if __name__ == '__main__':
    _main()

"""Generated images: animated Lissajous figures and complex-plane fractals."""

import cmath
import io
import math
import random
import sys
from collections.abc import Callable, Iterable
from typing import BinaryIO
from wsgiref.simple_server import make_server

from PIL import Image

RGB = tuple[int, int, int]

CYCLES = 5  # number of complete x oscillator revolutions
RES = 0.001  # angular resolution
SIZE = 100  # image canvas covers [-SIZE..+SIZE]
NFRAMES = 64  # number of animation frames
DELAY = 8  # delay between frames in 10ms units

_WHITE_INDEX, _BLACK_INDEX = 0, 1
_PALETTE = [255, 255, 255, 0, 0, 0]
_BLACK: RGB = (0, 0, 0)


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to ``out``."""
    source = random if rng is None else rng
    freq = source.random() * 3.0  # relative frequency of y oscillator
    side = 2 * SIZE + 1

    ts = []
    t, limit = 0.0, CYCLES * 2 * math.pi
    while t < limit:
        ts.append(t)
        t += RES
    columns = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in ts]

    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        pixels = bytearray(side * side)  # every pixel starts white
        for t, px in zip(ts, columns):
            py = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
            pixels[py * side + px] = _BLACK_INDEX
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(_PALETTE)
        frames.append(frame)
        phase += 0.1

    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )


def _gray(level: int) -> RGB:
    level &= 0xFF
    return (level, level, level)


def _u8(x: float) -> int:
    if not math.isfinite(x):
        return 0
    return int(x) & 0xFF


def _clamp_channel(v: int) -> int:
    if 0 <= v < 1 << 24:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr_to_rgb(y: int, cb: int, cr: int) -> RGB:
    yy = y * 0x10101
    cb1, cr1 = cb - 128, cr - 128
    r = yy + 91881 * cr1
    g = yy - 22554 * cb1 - 46802 * cr1
    b = yy + 116130 * cb1
    return (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def mandelbrot_color(z: complex) -> RGB:
    """Shade ``z`` by how quickly its Mandelbrot orbit escapes; black if it stays."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return _BLACK


def _chroma_color(v: complex, luma: int) -> RGB:
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(luma, blue, red)


def acos_color(z: complex) -> RGB:
    """Colour ``z`` by its complex arc cosine."""
    return _chroma_color(cmath.acos(z), 192)


def sqrt_color(z: complex) -> RGB:
    """Colour ``z`` by its complex square root."""
    return _chroma_color(cmath.sqrt(z), 128)


def newton_color(z: complex) -> RGB:
    """Shade ``z`` by how fast Newton's method converges to a root of z**4 - 1."""
    iterations, contrast = 37, 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except (ZeroDivisionError, OverflowError):
            return _BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return _BLACK


def mandelbrot_image(width: int = 1024, height: int = 1024) -> Image.Image:
    """Render the Mandelbrot set over the square from -2-2i to 2+2i as an RGBA image."""
    xmin, ymin, xmax, ymax = -2.0, -2.0, 2.0, 2.0
    data = []
    for py in range(height):
        y = py / height * (ymax - ymin) + ymin
        for px in range(width):
            x = px / width * (xmax - xmin) + xmin
            data.append((*mandelbrot_color(complex(x, y)), 255))
    img = Image.new("RGBA", (width, height))
    img.putdata(data)
    return img


def _lissajous_app(environ: dict, start_response: Callable) -> Iterable[bytes]:
    buffer = io.BytesIO()
    lissajous(buffer)
    body = buffer.getvalue()
    start_response(
        "200 OK",
        [("Content-Type", "image/gif"), ("Content-Length", str(len(body)))],
    )
    return [body]


def main_lissajous(argv: list[str] | None = None) -> int:
    """Write a Lissajous GIF to standard output, or serve one with ``web``."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        try:
            with make_server("localhost", 8000, _lissajous_app) as server:
                server.serve_forever()
        except OSError as err:
            print(err, file=sys.stderr)
            return 1
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0


def main_mandelbrot(argv: list[str] | None = None) -> int:
    """Write a PNG of the Mandelbrot set to standard output."""
    mandelbrot_image().save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main_lissajous())
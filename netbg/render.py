"""
This module draws the wallpaper text onto a flat bitmap.

The text block is anchored by its bottom-right corner, `margin_right` pixels
left of and `margin_bottom` pixels above the bottom-right corner of the
canvas. Line widths and heights are measured with the real font metrics.
"""
import os
import logging

from PIL import Image, ImageDraw, ImageFont

import netbg.globalvar as gv

__all__ = [
    "load_font",
    "measure_block",
    "text_origin",
    "render_text_image",
]

LOGGER = logging.getLogger(__name__)


def load_font(faces=None, size=gv.g_font_size, font_dirs=None):
    """
    Load the first fixed-width face that can be found.

    Every face is tried by name first (FreeType searches the system font
    directories), then inside each of `font_dirs`. Pillow's own scalable
    font is used when none of them is installed.
    """
    faces = gv.g_font_faces if faces is None else faces
    font_dirs = gv.g_font_dirs if font_dirs is None else font_dirs
    for face in faces:
        candidates = [face] + [os.path.join(d, face) for d in font_dirs]
        for candidate in candidates:
            try:
                font = ImageFont.truetype(candidate, size)
            except OSError:
                continue
            LOGGER.debug("Use font %s at %s pt" % (candidate, size))
            return font
    LOGGER.warning("None of %s is installed, use the default font" % faces)
    return ImageFont.load_default(size=size)


def measure_block(draw, lines, font):
    """
    Measure a block of text lines.

    :returns:
        ``(block_width, line_height)``, the widest rendered line and the
        tallest rendered line, in pixels.
    """
    block_width = 0
    line_height = 0
    for line in lines:
        left, top, right, bottom = draw.textbbox((0, 0), line, font=font)
        block_width = max(block_width, right)
        line_height = max(line_height, bottom)
    return block_width, line_height


def text_origin(canvas_size, block_size, margin_right, margin_bottom):
    """Top-left point of a block whose bottom-right corner sits at
    ``(width - margin_right, height - margin_bottom)``.
    """
    width, height = canvas_size
    block_width, block_height = block_size
    return (width - margin_right - block_width,
            height - margin_bottom - block_height)


def render_text_image(text, path, width=gv.g_canvas_width,
                      height=gv.g_canvas_height,
                      margin_right=gv.g_margin_right,
                      margin_bottom=gv.g_margin_bottom,
                      font=None,
                      background=gv.g_background_color,
                      foreground=gv.g_text_color):
    """
    Write `text` onto a flat canvas and save it as a BMP file.

    :param text:
        The multi-line text, lines separated by ``'\\n'``.
    :param path:
        Destination of the bitmap, overwritten if it exists.
    :returns:
        `path`, once the file is completely written.
    """
    if font is None:
        font = load_font()
    lines = text.split('\n')

    directory = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(directory):
        os.makedirs(directory)

    with Image.new('RGB', (width, height), background) as canvas:
        draw = ImageDraw.Draw(canvas)
        block_width, line_height = measure_block(draw, lines, font)
        x, y = text_origin((width, height),
                           (block_width, line_height * len(lines)),
                           margin_right, margin_bottom)
        LOGGER.debug("Draw %d lines at (%d, %d), block %dx%d"
                     % (len(lines), x, y, block_width,
                        line_height * len(lines)))
        for i, line in enumerate(lines):
            draw.text((x, y + i * line_height), line, font=font,
                      fill=foreground)
        canvas.save(path, 'BMP')
    LOGGER.debug("Wallpaper image written to %s" % path)
    return path

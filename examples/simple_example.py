#!/usr/bin/env python3
"""
Simple Example: Centered Caption with Shadow and Stroke

Draws a wrapped, centered caption onto a photo-sized canvas.
"""

import sys

from PIL import Image

from boxtext import Color, TextBox
from boxtext.render import PillowMetrics, PillowRasterizer

if len(sys.argv) < 2:
    sys.exit("usage: simple_example.py /path/to/font.ttf")

image = Image.new("RGB", (500, 300), (40, 90, 160))

box = TextBox(image, PillowMetrics(), PillowRasterizer())
box.set_font_face(sys.argv[1])
box.set_font_size(36)
box.set_font_color(Color(255, 255, 255))
box.set_box(20, 20, 460, 260)
box.set_text_align("center", "center")
box.set_text_shadow(Color(0, 0, 0, 128), 3, 3)
box.set_stroke_size(1)
box.set_stroke_color(Color(20, 20, 20))

box.draw("The quick brown fox jumps over the lazy dog")

image.save("caption.png")
print("✓ Image saved to: caption.png")

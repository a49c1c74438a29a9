#!/usr/bin/env python3
"""
Config Example: Render a Text Box Described in TOML

Loads box settings from a TOML file and renders them into a transparent PNG.

Example box.toml:

    [box]
    font_face = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
    font_size = 28
    font_color = "#1a1a1a"
    background_color = "#ffe066"
    align_x = "right"
    align_y = "bottom"
    letter_spacing = 2
"""

from pathlib import Path

from boxtext import load_config, render_text_image

config = load_config(Path("box.toml"))

image = render_text_image("Line one\nA second, much longer line that wraps", 400, 200, config)
image.save("box.png")

print("✓ Image saved to: box.png")

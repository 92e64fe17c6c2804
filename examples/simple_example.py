#!/usr/bin/env python3
"""
Simple Example: Banner with the Builder

This is the simplest way to render aligned multi-line block-art programmatically.
"""

from artfont import AsciiArtBuilder, render_ansi_compact

# Two lines, centered, with a blank row between them
banner = (
    AsciiArtBuilder.new()
    .text("Hello\nWorld")
    .align_center()
    .line_spacing(1)
    .build()
)
print(banner)

print()
print(render_ansi_compact("Compact 123"))

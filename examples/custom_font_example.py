#!/usr/bin/env python3
"""
Custom Font Example: Loading a JSON Font

Builds a tiny font document in memory, saves it, loads it back, and renders
with it. Characters the font doesn't define render as blank cells.
"""

from pathlib import Path

from artfont import FontError, load_font, load_from_document, render_with_font, save_font

document = {
    "width": 3,
    "height": 3,
    "spacing": 1,
    "glyphs": {
        "H": ["# #", "###", "# #"],
        "I": ["###", " # ", "###"],
        "!": [" # ", " # ", " . "],
    },
}

font = load_from_document(document, name="tiny")
print(render_with_font("HI!\nHI?", font))

output = Path("tiny_font.json")
save_font(font, output)
print(f"\n✓ Font saved to: {output}")

# Validation failures are raised as FontError subclasses
document["glyphs"]["X"] = ["# #", " # "]
try:
    load_from_document(document)
except FontError as e:
    print(f"Rejected: {type(e).__name__}: {e}")

print(render_with_font("HI", load_font(output)))

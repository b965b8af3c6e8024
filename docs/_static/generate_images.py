"""Generate static images for the documentation."""

from pathlib import Path

from shaper2d import RenderStyle, render_polygon

OUT = Path(__file__).resolve().parent

_GALLERY = ["5", "5/2", "6/2", "7/2", "7/3", "8/3", "9/4", "12/5"]


def generate_docs_images() -> None:
    """Render the notation gallery, light and dark."""
    light = RenderStyle(colour="black", background="white", font_size=18.0)
    dark = RenderStyle(font_size=18.0)
    for notation in _GALLERY:
        stem = notation.replace("/", "_")
        render_polygon(notation, OUT / f"{stem}_light.svg", style=light)
        render_polygon(notation, OUT / f"{stem}_dark.svg", style=dark)


if __name__ == "__main__":
    generate_docs_images()

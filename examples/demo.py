"""Demo script: render a few star polygons to PNG files."""

from pathlib import Path

from shaper2d import generate_shape, parse_polygon, render_polygon

OUTPUT = Path(__file__).resolve().parent

NOTATIONS = ["5", "5/2", "7/2", "7/3", "8/3", "12/5"]


def main():
    for notation in NOTATIONS:
        spec = parse_polygon(notation)
        shape = generate_shape(spec, scale=100.0)
        print(f"{{{spec}}}: {len(shape)} vertices")
        out = OUTPUT / f"star_{spec.n}_{spec.k}.png"
        render_polygon(spec, out)
        print(f"Rendered to {out}")


if __name__ == "__main__":
    main()

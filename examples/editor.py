"""Open the interactive star polygon editor.

Type digits and ``/`` to change the polygon, Backspace to delete, and
scroll to zoom.  The final polygon is printed when the window closes.
"""

import logging

from shaper2d import render_interactive


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    state = render_interactive("5/2")
    print(f"Final polygon: {{{state.polygon}}} at scale {state.scale:.1f}")


if __name__ == "__main__":
    main()

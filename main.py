"""
Interactive hex morph viewer.

Expected keys:
    - ESC: quit
    - G: toggle the unmorphed grid
    - T: toggle filled triangles
    - L: toggle morphed lines
    - O: switch the cursor between (a, b) and the mirrored copy's offset
"""

import logging

from hexmorph.app import Viewer
from hexmorph.graphics.settings import ViewerSettings


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    Viewer(ViewerSettings(rows=5, columns=5)).run()


if __name__ == "__main__":
    main()

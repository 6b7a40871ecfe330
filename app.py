"""Top-level launcher for PaletteViewer.

Allows starting the app with `python app.py` from the repo root.
"""
import sys

from paletteviewer.app import main

if __name__ == '__main__':
    sys.exit(main())

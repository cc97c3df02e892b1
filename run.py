"""
Source-checkout launcher for the asciispin window.

Puts ``src/`` on ``sys.path`` so the package imports without ``pip install``.

Usage:
    $ python run.py [IMAGE]
"""
import sys
import os

src_path: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src')
sys.path.insert(0, src_path)

from asciispin.main import main

if __name__ == "__main__":
    main()

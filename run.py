#!/usr/bin/env python3
"""
run.py - Main entry point for Join Dots

Examples:
    python run.py play
    python run.py play --delay 0
    python run.py benchmark --iterations 500 --debug
"""

import sys

from joindots.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:

    # Play against the threat-scanning opponent
    python run.py play --difficulty 2

    # Analyse a position (42 values, top row first)
    python run.py test --position 0,0,0,0,0,0,0,...,1,1,1,0,0,0,0

    # Benchmark with 5000 iterations and debug timings
    python run.py --debug benchmark --iterations 5000
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())

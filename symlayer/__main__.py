#!/usr/bin/env python3
"""
symlayer main entry point for running as a module: python3 -m symlayer
"""

import sys
from symlayer.cli import main

if __name__ == '__main__':
    sys.exit(main())

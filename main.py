#!/usr/bin/env python3
"""
GUI entry point for stack-diff.

Takes the same arguments as the stack-diff command and opens the result
viewer instead of printing to the console:

    python main.py -left before.txt -right after.txt
"""

import sys
import os

# Add the stack_diff package to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from stack_diff.main import gui_main


if __name__ == "__main__":
    sys.exit(gui_main())

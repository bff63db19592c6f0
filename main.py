#!/usr/bin/env python3
"""
Botsweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py show [--width W] [--height H] [--mines N] [--seed S]
"""
from src.botsweeper.cli import main


if __name__ == "__main__":
    main()

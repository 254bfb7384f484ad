"""Standalone entry point for previewing a recipient row from a shell."""

import sys
import os

# Ensure project root is on sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.main import main


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""CLI entry point for bpmnflow."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from bpmnflow.cli import main


if __name__ == "__main__":
    sys.exit(main())

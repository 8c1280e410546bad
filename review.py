#!/usr/bin/env python3
"""
Legal Review - research relay and report renderer

Simple usage:
    python review.py render answer.md                   # Outputs answer-review.docx
    python review.py render answer.md --format pdf      # PDF report
    python review.py research "prompt" --report out.docx
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from legal_review.cli import app

if __name__ == "__main__":
    app()

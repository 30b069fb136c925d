#!/usr/bin/env python3
"""
AI Code Reviewer runner

Runs one review for the pull_request event in $GITHUB_EVENT_PATH
without installing the package.
"""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from ai_code_reviewer.cli import main

if __name__ == '__main__':
    sys.exit(main())

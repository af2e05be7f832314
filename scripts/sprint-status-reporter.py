#!/usr/bin/env python3
"""
Sprint Status Reporter - Standalone CLI Tool
Print a sprint's Jira issues grouped by component and status

Usage:
  python sprint-status-reporter.py "Sprint 42"
  SPRINT="Sprint 42" python sprint-status-reporter.py
  python sprint-status-reporter.py --list-components

Requirements:
  pip install -e .
"""

import sys
from pathlib import Path

# Add script directory to path to import sprint_status_lib
sys.path.insert(0, str(Path(__file__).parent))

from sprint_status_lib.cli import main


if __name__ == "__main__":
    sys.exit(main())

"""
Shared fixtures for Sprint Status Reporter tests
"""

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
scripts_dir = Path(__file__).parent.parent
sys.path.insert(0, str(scripts_dir))

from sprint_status_lib.models import Component, IssueRecord


def make_issue(key, status="To do", components=(), summary="Summary", issue_type="Story", custom_fields=None):
    return IssueRecord(
        key=key,
        summary=summary,
        status_name=status,
        issue_type_name=issue_type,
        components=[Component(name) for name in components],
        custom_fields=custom_fields or {}
    )


@pytest.fixture
def issue_factory():
    return make_issue

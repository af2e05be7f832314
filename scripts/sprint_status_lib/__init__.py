"""
Sprint Status Reporter Library
Sprint issues from Jira grouped by component and status
"""

from .config_manager import ConfigManager
from .models import IssueRecord, Component, FlagEntry, Named, CatchAll, StatusTable, ReporterConfig
from .api_client import JiraClient, APIError, AuthenticationError
from .cache import ResultCache
from .classifier import Partition, classify
from .flags import is_flagged, flag_marker
from .query_builder import build_sprint_query
from .report_generator import SprintStatusReport, assemble_rows
from .exceptions import SprintReporterError, ConfigurationError, CacheReadError, DataIntegrityError

__all__ = [
    'ConfigManager',
    'IssueRecord',
    'Component',
    'FlagEntry',
    'Named',
    'CatchAll',
    'StatusTable',
    'ReporterConfig',
    'JiraClient',
    'APIError',
    'AuthenticationError',
    'ResultCache',
    'Partition',
    'classify',
    'is_flagged',
    'flag_marker',
    'build_sprint_query',
    'SprintStatusReport',
    'assemble_rows',
    'SprintReporterError',
    'ConfigurationError',
    'CacheReadError',
    'DataIntegrityError',
]

"""
Data models for Sprint Status Reporter
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union


CATCH_ALL = "*"


@dataclass(frozen=True)
class Component:
    """Component tag attached to an issue"""
    name: str


@dataclass
class IssueRecord:
    """Represents a Jira issue as returned by the sprint search"""
    key: str
    summary: Optional[str]
    status_name: Optional[str]
    issue_type_name: Optional[str]
    components: List[Component] = field(default_factory=list)
    custom_fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def component_names(self) -> List[str]:
        return [c.name for c in self.components]

    @classmethod
    def from_api_response(cls, data: dict) -> 'IssueRecord':
        """Create IssueRecord from Jira search API response"""
        fields = data.get('fields') or {}

        status_data = fields.get('status')
        status_name = status_data.get('name') if status_data else None

        type_data = fields.get('issuetype')
        issue_type_name = type_data.get('name') if type_data else None

        components = [
            Component(name=comp.get('name', ''))
            for comp in fields.get('components') or []
        ]

        # Keep every custom field untouched; their shapes vary per Jira instance
        custom_fields = {
            name: value for name, value in fields.items()
            if name.startswith('customfield_')
        }

        return cls(
            key=data.get('key', ''),
            summary=fields.get('summary'),
            status_name=status_name,
            issue_type_name=issue_type_name,
            components=components,
            custom_fields=custom_fields
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation used by the cache codec"""
        return {
            'key': self.key,
            'summary': self.summary,
            'status_name': self.status_name,
            'issue_type_name': self.issue_type_name,
            'components': [{'name': c.name} for c in self.components],
            'custom_fields': dict(self.custom_fields),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IssueRecord':
        """Inverse of to_dict. Raises KeyError/TypeError on a malformed record."""
        return cls(
            key=data['key'],
            summary=data['summary'],
            status_name=data['status_name'],
            issue_type_name=data['issue_type_name'],
            components=[Component(name=c['name']) for c in data['components']],
            custom_fields=dict(data['custom_fields'])
        )


@dataclass(frozen=True)
class FlagEntry:
    """One element of the 'Flagged' custom field array"""
    disabled: bool
    id: str
    self_link: str
    value: str


@dataclass(frozen=True)
class Named:
    """Selector matching one component or status by exact name"""
    name: str

    @property
    def raw(self) -> str:
        return self.name


@dataclass(frozen=True)
class CatchAll:
    """Selector for the '*' sentinel"""

    @property
    def raw(self) -> str:
        return CATCH_ALL


Selector = Union[Named, CatchAll]


def parse_selector(raw: str) -> Selector:
    """Turn a configured name into a selector; '*' is the catch-all."""
    if raw == CATCH_ALL:
        return CatchAll()
    return Named(raw)


@dataclass(frozen=True)
class StatusTable:
    """Group of statuses reported together in one table"""
    statuses: Tuple[Selector, ...]

    @classmethod
    def from_names(cls, names: Sequence[str]) -> 'StatusTable':
        return cls(statuses=tuple(parse_selector(n) for n in names))

    @property
    def matches_all(self) -> bool:
        return any(isinstance(s, CatchAll) for s in self.statuses)

    @property
    def names(self) -> List[str]:
        return [s.name for s in self.statuses if isinstance(s, Named)]

    @property
    def label(self) -> str:
        return "/".join(s.raw for s in self.statuses)

    def matches(self, status_name: Optional[str]) -> bool:
        if self.matches_all:
            return True
        if status_name is None:
            return False
        return status_name in self.names


DEFAULT_FIELDS = ["summary", "status", "components", "issuetype", "customfield_10000"]
DEFAULT_COMPONENTS = [CATCH_ALL]
DEFAULT_STATUS_TABLES = [["Done"], ["Review", "In progress", "Ready", "To do"]]


@dataclass(frozen=True)
class ReporterConfig:
    """Fully resolved configuration, immutable for the rest of the run"""
    fields: Tuple[str, ...]
    components: Tuple[Selector, ...]
    status_tables: Tuple[StatusTable, ...]
    jira_host: Optional[str] = None
    jira_user: Optional[str] = None
    jira_pass: Optional[str] = None
    board: Optional[str] = None
    project: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReporterConfig':
        """Build config from the JSON config layout, filling defaults"""
        return cls(
            fields=tuple(data.get('fields') or DEFAULT_FIELDS),
            components=tuple(parse_selector(c) for c in data.get('components') or DEFAULT_COMPONENTS),
            status_tables=tuple(
                StatusTable.from_names(t) for t in data.get('status_tables') or DEFAULT_STATUS_TABLES
            ),
            jira_host=data.get('jira_host'),
            jira_user=data.get('jira_user'),
            jira_pass=data.get('jira_pass'),
            board=data.get('board'),
            project=data.get('project')
        )

    def to_dict(self, include_password: bool = False) -> Dict[str, Any]:
        data = {
            'jira_host': self.jira_host,
            'jira_user': self.jira_user,
            'fields': list(self.fields),
            'board': self.board,
            'project': self.project,
            'components': [c.raw for c in self.components],
            'status_tables': [[s.raw for s in t.statuses] for t in self.status_tables],
        }
        if include_password:
            data['jira_pass'] = self.jira_pass
        return data

"""
Jira REST client
Direct HTTP calls for the sprint search
"""

import requests
import time
import logging
from typing import List, Dict, Sequence

from .models import IssueRecord

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for API errors"""
    pass


class AuthenticationError(APIError):
    """Authentication failed"""
    pass


def fetch_with_retry(api_call, max_retries=3):
    """Retry API call with exponential backoff on network errors"""
    for attempt in range(max_retries):
        try:
            return api_call()
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            if attempt < max_retries - 1:
                delay = 5 * (2 ** attempt)  # 5s, 10s, 20s
                logger.warning(f"Network error, retry {attempt+1}/{max_retries} in {delay}s: {e}")
                time.sleep(delay)
            else:
                raise APIError(f"Network error after {max_retries} attempts: {e}")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status in (401, 403):
                raise AuthenticationError(f"Jira rejected the credentials ({status})")
            raise APIError(f"Jira request failed: {e}")
        except requests.exceptions.RequestException as e:
            # Bad URL, unreadable (non-JSON) response body and the like
            raise APIError(f"Jira request failed: {e}")


class JiraClient:
    """Client for Jira REST API v2"""

    def __init__(self, host: str, user: str, password: str):
        self.base_url = host.rstrip("/")
        self.api_url = f"{self.base_url}/rest/api/2"
        self.session = requests.Session()
        self.session.auth = (user, password)
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json"
        })

    def search_issues(self, jql: str, fields: Sequence[str], max_results: int = 1000) -> List[IssueRecord]:
        """JQL search returning up to max_results issues in server order"""
        def call():
            params = {
                "jql": jql,
                "startAt": 0,
                "maxResults": max_results,
                "fields": ",".join(fields)
            }
            response = self.session.get(f"{self.api_url}/search", params=params, timeout=60)
            response.raise_for_status()
            data = response.json()

            issues = [IssueRecord.from_api_response(item) for item in data.get('issues', [])]
            total = data.get('total', len(issues))
            if total > len(issues):
                logger.warning(f"Search matched {total} issues, only {len(issues)} returned")
            return issues

        return fetch_with_retry(call)

    def get_project_components(self, project: str) -> List[Dict]:
        """All components defined for a project"""
        def call():
            url = f"{self.api_url}/project/{project}/components"
            response = self.session.get(url, timeout=30)
            response.raise_for_status()
            return response.json()

        return fetch_with_retry(call)

"""
Per-sprint snapshot cache for search results

One CBOR file per sprint name under ./cache. A snapshot never expires: once written it is
used for every later run of that sprint until someone deletes the file.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import cbor2

from .exceptions import CacheReadError, InvalidSprintKeyError
from .models import IssueRecord

logger = logging.getLogger(__name__)

MAX_RESULTS = 1000

RemoteFetch = Callable[[str, Sequence[str], int], List[IssueRecord]]


class ResultCache:
    """Loads a sprint's issues from disk, or fetches and stores them on a miss"""

    DEFAULT_DIR = Path("cache")

    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir) if cache_dir else self.DEFAULT_DIR

    def path_for(self, sprint_key: str) -> Path:
        """Snapshot location; sprint names are used as-is (case-sensitive)"""
        path = self.cache_dir / sprint_key
        # Must be a file directly inside cache_dir
        if path.resolve().parent != self.cache_dir.resolve():
            raise InvalidSprintKeyError(
                f"Sprint name '{sprint_key}' does not map to a file inside {self.cache_dir}"
            )
        return path

    def fetch_or_load(
        self,
        sprint_key: str,
        query_fn: Callable[[], str],
        remote_fn: RemoteFetch,
        fields: Sequence[str],
        max_results: int = MAX_RESULTS
    ) -> Tuple[List[IssueRecord], bool]:
        """
        Return (issues, used_cache).

        A present snapshot is always used and the remote is not contacted. On a miss the
        query is built, the remote fetch runs, and the result is written for next time.
        """
        path = self.path_for(sprint_key)
        if path.exists():
            logger.info(f"Loading sprint '{sprint_key}' from cache: {path}")
            return self.load(path), True

        query = query_fn()
        logger.debug(f"Query: {query}")
        issues = remote_fn(query, list(fields), max_results)
        logger.info(f"Fetched {len(issues)} issues for sprint '{sprint_key}'")

        self.store(path, issues)
        return issues, False

    def load(self, path: Path) -> List[IssueRecord]:
        """Decode a snapshot. Any failure is fatal for the run."""
        try:
            with open(path, 'rb') as f:
                payload = cbor2.load(f)
            return [IssueRecord.from_dict(item) for item in payload]
        except (OSError, cbor2.CBORDecodeError, ValueError, KeyError, TypeError) as e:
            raise CacheReadError(
                f"Cannot read cache file {path}: {e}. Clear the `{self.cache_dir}` folder and re-run.",
                path=path
            ) from e

    def store(self, path: Path, issues: List[IssueRecord]) -> bool:
        """Write a snapshot; failures are logged and reported as False"""
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create cache directory {self.cache_dir}: {e}")
            return False

        tmp_path = None
        try:
            data = cbor2.dumps([issue.to_dict() for issue in issues])

            # Atomic write using temp file
            with tempfile.NamedTemporaryFile(
                mode='wb',
                dir=self.cache_dir,
                delete=False,
                suffix='.tmp'
            ) as tmp_file:
                tmp_path = tmp_file.name
                tmp_file.write(data)

            shutil.move(tmp_path, path)
        except (OSError, cbor2.CBOREncodeError) as e:
            logger.warning(f"Error writing to cache file. {e}")
            if tmp_path:
                Path(tmp_path).unlink(missing_ok=True)
            return False

        logger.debug(f"Cached {len(issues)} issues to {path}")
        return True

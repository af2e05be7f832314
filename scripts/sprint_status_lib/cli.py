"""
Command-line entry point for Sprint Status Reporter
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .api_client import APIError, JiraClient
from .cache import ResultCache
from .config_manager import ConfigManager
from .exceptions import SprintReporterError
from .report_generator import SprintStatusReport

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: str = None) -> None:
    handlers = [logging.StreamHandler(sys.stderr)]
    handlers[0].setLevel(logging.DEBUG if debug else logging.WARNING)
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=handlers
    )


def list_components(jira_client: JiraClient, project: str) -> None:
    for comp in jira_client.get_project_components(project):
        print(f"{comp.get('name')}:{comp.get('id')}")


def main(argv=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Sprint Status Reporter - sprint issues grouped by component and status",
        epilog="The sprint can also be given with the SPRINT environment variable."
    )
    parser.add_argument("sprint", nargs="?", help="Sprint name")
    parser.add_argument("--list-components", action="store_true",
                        help="Print name:id of every component in the configured project and exit")
    parser.add_argument("--cache-dir", type=Path, default=ResultCache.DEFAULT_DIR,
                        help="Directory holding cached sprint results (default: ./cache)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging to stderr")
    parser.add_argument("--log-file", help="Also write the debug log to this file")

    args = parser.parse_args(argv)
    setup_logging(args.debug, args.log_file)
    logger.info(f"Command: {' '.join(sys.argv)}")

    try:
        config = ConfigManager().load()
        jira_client = JiraClient(config.jira_host, config.jira_user, config.jira_pass)

        if args.list_components:
            if not config.project:
                print("[ERROR] Missing project name in conf.")
                return 1
            list_components(jira_client, config.project)
            return 0

        sprint = os.environ.get("SPRINT") or args.sprint
        if not sprint:
            parser.error("No SPRINT given.")
        print(f"Sprint: {sprint}")

        report = SprintStatusReport(
            config,
            jira_client.search_issues,
            cache=ResultCache(args.cache_dir)
        )
        report.run(sprint)
        return 0

    except (SprintReporterError, APIError) as e:
        print()
        print(f"[ERROR] {e}")
        logger.exception("Report generation failed")
        return 1

    except KeyboardInterrupt:
        print()
        print("[CANCELLED] Report generation interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())

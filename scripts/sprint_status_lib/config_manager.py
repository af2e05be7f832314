"""
Configuration manager with credential storage using system keyring
"""

import getpass
import json
import logging
import os
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

import keyring
from keyring.errors import KeyringError

from .models import ReporterConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Resolves the reporter configuration from file, keyring, environment and prompts"""

    CONFIG_FILE = Path.home() / ".sprint-status-config.json"
    SERVICE_NAME = "sprint-status-reporter"
    PASSWORD_KEY = "jira_pass"

    ENV_VARS = {
        "jira_host": "JIRA_HOST",
        "jira_user": "JIRA_USER",
        "jira_pass": "JIRA_PASS",
    }

    def __init__(
        self,
        config_file: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass.getpass
    ):
        self.config_file = Path(config_file) if config_file else self.CONFIG_FILE
        self.environ = os.environ if environ is None else environ
        self.input_fn = input_fn
        self.password_fn = password_fn

    def load(self) -> ReporterConfig:
        """
        Build the run's configuration.

        File values win, then the keyring (password only), then JIRA_HOST / JIRA_USER /
        JIRA_PASS. Anything still missing is asked for interactively and written back.
        """
        logger.debug(f"Config file: {self.config_file}")
        data = self._load_config_file()

        if not data.get("jira_pass"):
            data["jira_pass"] = self._get_saved_password()

        for key, env_var in self.ENV_VARS.items():
            if not data.get(key):
                data[key] = self.environ.get(env_var)

        dirty = False
        save_pass = False

        if not data.get("jira_host"):
            data["jira_host"] = self.input_fn("Jira URL: ").strip()
            dirty = True
        if not data.get("jira_user"):
            data["jira_user"] = self.input_fn("Jira username: ").strip()
            dirty = True
        if not data.get("jira_pass"):
            data["jira_pass"] = self.password_fn("Jira password: ").strip()
            answer = self.input_fn("Save password to file? [y/n] ").strip()
            save_pass = answer.lower() == "y"
            dirty = True

        config = ReporterConfig.from_dict(data)
        if dirty:
            self.save(config, save_password=save_pass)
        return config

    def save(self, config: ReporterConfig, save_password: bool = False) -> None:
        """Write non-secret settings to JSON; the password only ever goes to the keyring"""
        try:
            self.config_file.write_text(json.dumps(config.to_dict(), indent=2))
        except OSError as e:
            logger.warning(f"Failed to write config to file. {e}")

        if save_password and config.jira_pass:
            try:
                keyring.set_password(self.SERVICE_NAME, self.PASSWORD_KEY, config.jira_pass)
            except KeyringError as e:
                logger.warning(f"Could not store password in system keyring: {e}")

    def _get_saved_password(self) -> Optional[str]:
        try:
            return keyring.get_password(self.SERVICE_NAME, self.PASSWORD_KEY)
        except KeyringError as e:
            logger.warning(f"Could not read password from system keyring: {e}")
            return None

    def _load_config_file(self) -> Dict:
        """Load config file from disk; unreadable files fall back to defaults"""
        if not self.config_file.exists():
            return {}

        try:
            data = json.loads(self.config_file.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable config file {self.config_file}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

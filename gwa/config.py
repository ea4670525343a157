"""Configuration handling for gwa"""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, List

from gwa.constants import METADATA_DIR_NAME
from gwa.exceptions import ConfigError
from gwa.logging_config import get_logger

logger = get_logger(__name__)

GLOBAL_CONFIG_PATH = Path("~/.config/gwa/config.toml")
PROJECT_CONFIG_NAME = "config.toml"
ALT_PROJECT_CONFIG_NAME = ".gwaconfig"


@dataclass
class Config:
    """Configuration for gwa with validation."""

    # Worktree placement
    worktrees_dir: Optional[str] = None  # None = next to the repository
    default_base: str = "main"

    # Copied into new worktrees
    copy_files: List[str] = field(default_factory=list)
    copy_dirs: List[str] = field(default_factory=list)

    # Launchers
    editor: str = "code"
    ai_tool: str = "claude"

    # Hooks
    post_create_hook: Optional[str] = None
    pre_remove_hook: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_types()
        self._validate_default_base()
        self._validate_lists()
        self._validate_launchers()

    def _validate_types(self):
        """Validate string fields hold strings."""
        for name in ("default_base", "editor", "ai_tool"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        for name in ("worktrees_dir", "post_create_hook", "pre_remove_hook"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string")

    def _validate_default_base(self):
        """Validate default_base is not empty."""
        if not self.default_base or not self.default_base.strip():
            raise ValueError("default_base cannot be empty")
        self.default_base = self.default_base.strip()

    def _validate_lists(self):
        """Validate copy lists are lists of strings."""
        for name in ("copy_files", "copy_dirs"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{name} must be a list of strings")

    def _validate_launchers(self):
        """Validate editor and ai_tool are not empty."""
        for name in ("editor", "ai_tool"):
            if not getattr(self, name):
                raise ValueError(f"{name} cannot be empty")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)


def global_config_path() -> Path:
    return GLOBAL_CONFIG_PATH.expanduser()


def project_config_path(repo_root: str) -> Path:
    return Path(repo_root) / METADATA_DIR_NAME / PROJECT_CONFIG_NAME


def config_paths(repo_root: Optional[str]) -> list[Path]:
    """Config files in merge order; later files override earlier ones."""
    paths = [global_config_path()]
    if repo_root:
        paths.append(project_config_path(repo_root))
        paths.append(Path(repo_root) / ALT_PROJECT_CONFIG_NAME)
    return paths


def read_config_file(path: Path) -> dict:
    """Read one TOML config file; a missing file reads as empty.

    Raises:
        ConfigError: If the file exists but is not valid TOML
    """
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(str(path), str(e)) from e


def load_config(repo_root: Optional[str] = None) -> Config:
    """Load and merge the global and project configuration.

    Args:
        repo_root: Repository root whose project config is merged (None = global only)

    Raises:
        ConfigError: If a config file is malformed or holds invalid values
    """
    merged: dict = {}
    loaded = []
    for path in config_paths(repo_root):
        data = read_config_file(path)
        if data:
            logger.debug(f"Loaded config from {path}")
            merged.update(data)
            loaded.append(str(path))

    try:
        return Config.from_dict(merged)
    except (TypeError, ValueError) as e:
        raise ConfigError(", ".join(loaded), str(e)) from e

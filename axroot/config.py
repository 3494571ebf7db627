"""
Bootstrap configuration for axroot.

Resolves where the dependency lives, where it is cloned from and which
configuration script to run. Values are resolved once at startup with the
precedence: CLI flag > environment variable > YAML config file > default.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass


DEFAULT_ROOT_PATH = ".arceos"
DEFAULT_REMOTE_URL = "https://github.com/undefined-os/ArceOS"
DEFAULT_CONFIGURE_SCRIPT = "scripts/set_ax_root.sh"
DEFAULT_CONFIG_FILE = "axroot.yaml"

# Environment overrides
ENV_ROOT_PATH = "AX_ROOT"
ENV_REMOTE_URL = "AX_REMOTE_URL"
ENV_CONFIG_FILE = "AXROOT_CONFIG"

# YAML key -> BootstrapConfig field
YAML_KEYS = {
    'root_path': 'root_path',
    'remote_url': 'remote_url',
    'configure_script': 'configure_script',
    'configure': 'configure_enabled',
    'git': 'git_executable',
    'depth': 'clone_depth',
    'branch': 'branch',
}


@dataclass
class BootstrapConfig:
    """Resolved settings for one bootstrap run."""
    root_path: Path = Path(DEFAULT_ROOT_PATH)
    remote_url: str = DEFAULT_REMOTE_URL
    configure_script: Path = Path(DEFAULT_CONFIGURE_SCRIPT)
    configure_enabled: bool = True
    git_executable: str = "git"
    clone_depth: Optional[int] = None
    branch: Optional[str] = None

    def __post_init__(self):
        for name in ('root_path', 'configure_script'):
            value = getattr(self, name)
            if not isinstance(value, (str, Path)):
                raise ValueError(f"{name} must be a path, got {type(value).__name__}")
            if not str(value).strip():
                raise ValueError(f"{name} must not be empty")
        for name in ('remote_url', 'git_executable'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
        if not isinstance(self.configure_enabled, bool):
            raise ValueError(f"configure must be true or false, got {self.configure_enabled!r}")
        if self.branch is not None and not isinstance(self.branch, str):
            raise ValueError(f"branch must be a string, got {type(self.branch).__name__}")

        if not self.remote_url.strip():
            raise ValueError("remote_url must not be empty")
        self.root_path = Path(self.root_path).expanduser()
        self.configure_script = Path(self.configure_script).expanduser()

        if self.clone_depth is not None:
            if isinstance(self.clone_depth, bool) or not isinstance(self.clone_depth, int):
                raise ValueError(f"depth must be a positive integer, got {self.clone_depth!r}")
            if self.clone_depth < 1:
                raise ValueError(f"depth must be a positive integer, got {self.clone_depth}")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> 'BootstrapConfig':
        """
        Load configuration from a YAML file, filling gaps with defaults.

        Args:
            yaml_path: Path to YAML config file

        Returns:
            BootstrapConfig instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If the file is not valid YAML, not a mapping, has unknown
                keys or holds a value of the wrong type
        """
        return cls(**load_yaml_settings(yaml_path))


def load_yaml_settings(yaml_path: Path) -> Dict[str, Any]:
    """
    Read a YAML config file into BootstrapConfig keyword arguments.

    An empty file yields an empty dict. A relative `configure_script` is
    anchored at the config file's directory.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config in {yaml_path}: must be a YAML dict")

    unknown = sorted(str(key) for key in data if key not in YAML_KEYS)
    if unknown:
        raise ValueError(f"Unknown keys in {yaml_path}: {', '.join(unknown)}")

    settings = {YAML_KEYS[key]: value for key, value in data.items()}

    script = settings.get('configure_script')
    if isinstance(script, (str, Path)) and str(script).strip():
        script = Path(script).expanduser()
        if not script.is_absolute():
            settings['configure_script'] = yaml_path.expanduser().absolute().parent / script

    return settings


def find_configure_script(start: Path) -> Path:
    """
    Locate the default configuration script.

    Walks up from `start` and returns the first `scripts/set_ax_root.sh`
    found, so the CLI works from any directory inside the project. Falls
    back to `start/scripts/set_ax_root.sh` when none exists.
    """
    start = Path(start).absolute()
    for directory in (start, *start.parents):
        candidate = directory / DEFAULT_CONFIGURE_SCRIPT
        if candidate.is_file():
            return candidate
    return start / DEFAULT_CONFIGURE_SCRIPT


def resolve_config(
    cli_overrides: Optional[Dict[str, Any]] = None,
    config_file: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
    cwd: Optional[Path] = None
) -> BootstrapConfig:
    """
    Resolve the effective configuration.

    The returned `configure_script` is always absolute: a CLI value is taken
    relative to `cwd`, a config file value relative to the file, and the
    default is searched for from `cwd` upwards.

    Args:
        cli_overrides: Field values given on the command line (None values ignored)
        config_file: Explicit YAML config path (must exist if given)
        environ: Environment mapping (default: os.environ)
        cwd: Directory used to find the default config file and script

    Returns:
        BootstrapConfig

    Raises:
        FileNotFoundError: If an explicitly named config file doesn't exist
        ValueError: If any resolved value is invalid
    """
    if environ is None:
        environ = os.environ
    if cwd is None:
        cwd = Path.cwd()
    cwd = Path(cwd).absolute()

    settings: Dict[str, Any] = {}

    # Config file: explicit path must exist, default is optional
    if config_file is None:
        config_file = environ.get(ENV_CONFIG_FILE)
    if config_file:
        settings.update(load_yaml_settings(Path(config_file).expanduser()))
    else:
        default_file = cwd / DEFAULT_CONFIG_FILE
        if default_file.is_file():
            settings.update(load_yaml_settings(default_file))

    # Environment
    if environ.get(ENV_ROOT_PATH):
        settings['root_path'] = environ[ENV_ROOT_PATH]
    if environ.get(ENV_REMOTE_URL):
        settings['remote_url'] = environ[ENV_REMOTE_URL]

    # Command line
    for key, value in (cli_overrides or {}).items():
        if value is not None:
            settings[key] = value

    if 'configure_script' not in settings:
        settings['configure_script'] = find_configure_script(cwd)

    config = BootstrapConfig(**settings)
    if not config.configure_script.is_absolute():
        config.configure_script = cwd / config.configure_script
    return config

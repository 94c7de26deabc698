"""Locates the project root and the .newsgrid working directory."""

from pathlib import Path


def get_project_root() -> Path:
    """Find the project root by searching upwards from the current working directory.

    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', '.newsgrid', 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers found (e.g. running in /tmp)
    return current_path


def get_newsgrid_dir() -> Path:
    """Returns the path to the .newsgrid directory in the project root."""
    return get_project_root() / '.newsgrid'


def get_logs_path() -> Path:
    """Returns the path to the log directory inside .newsgrid."""
    return get_newsgrid_dir() / 'logs'


def is_initialized() -> bool:
    """Checks if the .newsgrid directory exists in the project root."""
    return get_newsgrid_dir().is_dir()


def init_newsgrid(storage_name: str = 'selectors') -> Path:
    """Initializes the .newsgrid directory and returns the requested storage path.

    Args:
        storage_name: Subdirectory to create inside .newsgrid. Defaults to 'selectors'.

    Returns:
        Path to the storage subdirectory.

    """
    newsgrid_dir = get_newsgrid_dir()
    storage_dir = newsgrid_dir / storage_name
    storage_dir.mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = newsgrid_dir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by newsgrid\n*\n')

    return storage_dir

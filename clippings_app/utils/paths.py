from pathlib import Path

def get_package_root() -> Path:
    """Returns the root directory of the clippings_app package."""
    # This file is in clippings_app/utils/paths.py
    # Root is 2 levels up
    return Path(__file__).resolve().parent.parent

def get_templates_dir() -> Path:
    """Returns the directory holding the Jinja2 templates."""
    return get_package_root() / "web" / "templates"

def get_env_file() -> Path:
    """Returns the path to the optional .env file next to the package."""
    return get_package_root().parent / ".env"

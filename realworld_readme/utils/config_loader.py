import logging
from pathlib import Path

import yaml

from realworld_readme.models.repo import Category, RepoDescriptor


def load_repo_file(path):
    """Load one category file into RepoDescriptors, keeping file order."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        entries = yaml.safe_load(f)

    if entries is None:
        logging.warning(f"{path.name} is empty")
        return []
    if not isinstance(entries, list):
        raise ValueError(f"Expected a list of repositories in {path}, got {type(entries).__name__}")

    repos = [RepoDescriptor.from_dict(entry, source=path.name) for entry in entries]
    logging.debug(f"Loaded {len(repos)} repos from {path}")
    return repos


def load_category_repos(config_dir):
    config_dir = Path(config_dir)
    return {category: load_repo_file(config_dir / category.config_filename) for category in Category}


def read_template(path):
    # split on "\n" so a trailing newline survives as a final empty line
    return Path(path).read_text(encoding="utf-8").split("\n")

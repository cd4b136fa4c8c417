import argparse
import os
from pathlib import Path

DEFAULT_TEMPLATE_FILE = "../README.template.md"
DEFAULT_TARGET_FILE = "../README.md"
DEFAULT_WIP_REPO = "gothinkster/realworld"


def validate_file(arg):
    file_path = Path(arg).resolve()

    if file_path.is_file():
        return file_path
    else:
        message = f"Error! This is not valid file: {arg}"
        raise argparse.ArgumentTypeError(message)


def validate_directory(arg):
    dir_path = Path(arg).resolve()

    if dir_path.is_dir():
        return dir_path
    else:
        message = f"Error! This is not valid directory: {arg}"
        raise argparse.ArgumentTypeError(message)


def validate_bool(arg):
    if isinstance(arg, bool):
        return arg
    elif isinstance(arg, str) and arg.lower() in ["0", "false", "no", "f"]:
        return False
    elif isinstance(arg, str) and arg.lower() in ["1", "true", "yes", "t"]:
        return True
    return False


def validate_repo_name(arg):
    owner, _, name = arg.partition("/")
    if owner and name and "/" not in name:
        return arg
    raise argparse.ArgumentTypeError(f"Error! Expected owner/name, got: {arg}")


def find_github_token():
    # GH_TOKEN is what the CI workflow exports; GITHUB_TOKEN is the Actions default
    for variable in ("GH_TOKEN", "GITHUB_TOKEN"):
        token = os.getenv(variable)
        if token:
            return token
    return None


def setup_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="realworld_readme",
        description="Regenerate README.md from README.template.md with live GitHub star rankings",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=os.getenv("RR_TEMPLATE", DEFAULT_TEMPLATE_FILE),
        help="Template to render. Lines containing INSERT_<CATEGORY>_REPOS or INSERT_<CATEGORY>_WIP are replaced.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=os.getenv("RR_OUTPUT", DEFAULT_TARGET_FILE),
        help="File the rendered README is written to. It is fully overwritten once rendering succeeds.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=os.getenv("RR_CONFIG_DIR", "."),
        help="""
            Directory holding frontend-repos.yaml, backend-repos.yaml, mobile-repos.yaml
            and fullstack-repos.yaml
            """,
    )
    parser.add_argument(
        "--wip-repo",
        type=validate_repo_name,
        default=os.getenv("RR_WIP_REPO", DEFAULT_WIP_REPO),
        help="Repository (owner/name) whose open issues labelled 'wip' are listed as work in progress",
    )
    parser.add_argument("--github-token", default=find_github_token(), help=argparse.SUPPRESS)
    parser.add_argument(
        "--dry-run",
        default=validate_bool(os.getenv("RR_DRY_RUN", False)),
        action="store_true",
        help="Print the rendered README instead of writing it",
    )
    parser.add_argument(
        "--debug",
        default=validate_bool(os.getenv("RR_DEBUG", False)),
        action="store_true",
        help="Enable debug logging when running script",
    )

    return parser.parse_args(argv)


def validate_input_paths(args):
    # Runs after the token check, so a missing credential is reported first
    args.template = validate_file(args.template)
    args.config_dir = validate_directory(args.config_dir)
    return args

#!/usr/bin/env python3
import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from realworld_readme.models.repo import Category
from realworld_readme.utils import github_functions as gh
from realworld_readme.utils.args import setup_args, validate_input_paths
from realworld_readme.utils.config_loader import load_category_repos, read_template
from realworld_readme.utils.logging import setup_logger
from realworld_readme.utils.table_renderer import autogenerated_banner, build_sorted_table, get_wip_projects

# Checked in this order; the first token found in a line decides its replacement
PLACEHOLDERS = [("table", category.table_placeholder, category) for category in Category] + [
    ("wip", category.wip_placeholder, category) for category in Category
]


def match_placeholder(line):
    for kind, token, category in PLACEHOLDERS:
        if token in line:
            return kind, category
    return None


def render_readme(template_lines, category_repos, github, tracker_repo, today=None, template_name="README.template.md"):
    """Build the README as a new list of lines.

    Lines holding a placeholder are swapped for the generated block, every
    other template line is copied through in order.
    """
    today = today or date.today()
    output = autogenerated_banner(template_name)

    for line in template_lines:
        match match_placeholder(line):
            case ("table", category):
                logging.debug(f"Rendering {category.label} table")
                output.extend(build_sorted_table(category_repos.get(category, []), github, today))
            case ("wip", category):
                logging.debug(f"Rendering {category.label} WIP list")
                output.append(get_wip_projects(category.label, github, tracker_repo))
            case None:
                output.append(line)

    return output


def write_readme(output_path, lines):
    output_path = Path(output_path)
    output_path.write_text("\n".join(lines), encoding="utf-8", newline="\n")
    logging.info(f"Wrote output to file: [{output_path}]")
    return output_path


def generate_readme(args, github=None):
    category_repos = load_category_repos(args.config_dir)
    for category, repos in category_repos.items():
        logging.debug(f"{category.label}: {len(repos)} repos configured")

    template_lines = read_template(args.template)
    github = github or gh.create_client(args.github_token)

    lines = render_readme(
        template_lines,
        category_repos,
        github,
        tracker_repo=args.wip_repo,
        template_name=Path(args.template).name,
    )

    if args.dry_run:
        print("\n".join(lines))
        logging.info("Dry run - no file written")
        return lines

    write_readme(args.output, lines)
    return lines


def main(argv=None):
    args = setup_args(argv)
    setup_logger(args.debug if args.debug else False)
    logging.info("Running realworld_readme")

    if not args.github_token:
        logging.error("GH_TOKEN environment variable needs to be specified.")
        sys.exit(1)

    try:
        validate_input_paths(args)
    except argparse.ArgumentTypeError as e:
        logging.error(e)
        sys.exit(2)

    try:
        generate_readme(args)
    except Exception:
        logging.exception("README generation failed, leaving the existing output untouched")
        raise


if __name__ == "__main__":
    main()

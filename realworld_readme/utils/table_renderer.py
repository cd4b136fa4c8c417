import logging

from realworld_readme.utils.github_functions import fetch_star_count, fetch_wip_issues

CELLS_PER_ROW = 3
SPACER_CELL = "| ![empty](https://raw.githubusercontent.com/gothinkster/realworld/master/media/spacer-1669x257.gif)"
TABLE_HEADER = [
    "| 🥇 | 🥈 | 🥉 |",
    "| :---:         |     :---:      |          :---: |",
]
WIP_SEPARATOR = " | \n"
# Invisible separator keeps an empty list from rendering as a horizontal rule
EMPTY_WIP = "**\u2063**"


def autogenerated_banner(template_name="README.template.md"):
    return [
        "<!-- ",
        "      NOTE: This file is autogenerated!!!",
        "            Please do not directly edit this file.",
        f"            Instead, please edit: {template_name}",
        "-->",
    ]


def popularity_date(today):
    # Matches the "Sat Oct 17 2026" form earlier READMEs were generated with
    return today.strftime("%a %b %d %Y")


def annotate_star_counts(repos, github):
    for repo in repos:
        repo.stargazers_count = fetch_star_count(github, repo.repo).value
    return repos


def sort_by_stars(repos):
    # sorted() is stable with reverse=True, so ties keep configuration order
    return sorted(repos, key=lambda r: r.stargazers_count, reverse=True)


def ranking_comment(repos):
    lines = ["<!--", "  Ranking:"]
    lines.extend(f"    {rank:>2}: {repo.title}" for rank, repo in enumerate(repos, start=1))
    lines.append("-->")
    return lines


def repo_cell(repo):
    return (
        f"| [**{repo.title}**<br/> "
        f"![{repo.title}]({repo.logo}) "
        f"![Star](https://img.shields.io/github/stars/{repo.repo}.svg?style=social&label=Star) "
        f"![Fork](https://img.shields.io/github/forks/{repo.repo}.svg?style=social&label=Fork)]"
        f"({repo.url})"
    )


def table_rows(repos):
    """Lay repos out three to a row, padding short lists with spacer cells."""
    rows = []
    row = ""
    for i in range(max(len(repos), CELLS_PER_ROW)):
        row += repo_cell(repos[i]) if i < len(repos) else SPACER_CELL
        if (i + 1) % CELLS_PER_ROW == 0:
            rows.append(row)
            row = ""
    if row:
        rows.append(row)
    return rows


def build_sorted_table(repos, github, today):
    annotate_star_counts(repos, github)
    ranked = sort_by_stars(repos)

    sorted_summary = "\n".join(f"  {r.repo} ({r.stargazers_count})" for r in ranked)
    logging.info(f"Sorted repos:\n\n{sorted_summary}\n")

    output = ranking_comment(ranked)
    output.append(f"> _Sorted by popularity on {popularity_date(today)}_")
    output.append("")
    output.extend(TABLE_HEADER)
    output.extend(table_rows(ranked))
    return output


def format_wip_issues(issues):
    if not issues:
        return EMPTY_WIP
    # Listed in reverse of the order the tracker returned them
    links = [f"[{issue.title}]({issue.html_url})" for issue in reversed(issues)]
    return f"**{WIP_SEPARATOR.join(links)}**"


def get_wip_projects(label, github, tracker_repo):
    issues = fetch_wip_issues(github, tracker_repo, label)
    logging.info(f"Number of {label} WIP issues found: {len(issues)}")
    return format_wip_issues(issues)

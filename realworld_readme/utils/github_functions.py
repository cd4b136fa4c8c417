import logging

import requests
from github import Auth, Github, GithubException

from realworld_readme.models.repo import StarCount, WipIssue

WIP_LABEL = "wip"
ISSUES_PER_PAGE = 100


def create_client(github_token):
    # retry=None: a failed request is reported once, never replayed
    return Github(auth=Auth.Token(github_token), per_page=ISSUES_PER_PAGE, retry=None)


def fetch_star_count(github, repo):
    """Look up the live star count for ``repo`` ("owner/name").

    Never raises for API or network failures; those come back as
    ``StarCount.failure`` so one bad repo does not stop the rest.
    """
    try:
        gh_repo = github.get_repo(repo)
    except GithubException as e:
        logging.warning(f"Error fetching data for: {repo}")
        logging.debug(f"GitHub API error for {repo}: {e.status} {e.data}")
        return StarCount.failure(f"GitHub API error {e.status}")
    except requests.exceptions.RequestException as e:
        logging.warning(f"Error fetching data for: {repo}")
        logging.debug(f"Request for {repo} failed: {e}")
        return StarCount.failure(str(e))

    logging.debug(f"{repo}: {gh_repo.stargazers_count} stars")
    return StarCount.success(gh_repo.stargazers_count)


def fetch_wip_issues(github, tracker_repo, label):
    """Return the first page (up to 100) of open issues labelled wip + label, in tracker order."""
    repo = github.get_repo(tracker_repo, lazy=True)
    issues = repo.get_issues(state="open", labels=[WIP_LABEL, label]).get_page(0)

    return [WipIssue(title=issue.title, html_url=issue.html_url) for issue in issues]

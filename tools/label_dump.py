"""Dump the labels of a GitHub repository into a YAML file.

Usage:
  python -m tools.label_dump ORG REPO [-o label.yaml] [--token TOKEN]

The token defaults to GITHUB_TOKEN (environment or .env).
"""
import argparse
import sys

import requests
import yaml

from audit.logger import logger
from config import Config
from exceptions.relay_exceptions import LabelDumpError

DEFAULT_PER_PAGE = 50
DEFAULT_TIMEOUT_SECONDS = 30

# Extra keys kept in the dump so the file can be hand-edited into a label config
EXTRA_FIELDS = (
    "target",
    "prowPlugin",
    "isExternalPlugin",
    "addedBy",
    "previously",
    "deleteAfter",
)


def fetch_labels(org, repo, token=None, *, per_page=DEFAULT_PER_PAGE, api_url=None):
    """
    Lists every label of org/repo, following the Link: rel="next" pagination.
    """
    api_url = api_url or Config.GITHUB_API_URL
    url = f"{api_url.rstrip('/')}/repos/{org}/{repo}/labels"
    params = {"per_page": per_page}
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    labels = []
    while url:
        try:
            resp = requests.get(
                url,
                headers=headers,
                params=params,
                timeout=DEFAULT_TIMEOUT_SECONDS,
            )
            resp.raise_for_status()
            page = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise LabelDumpError(f"Failed to list labels for {org}/{repo}: {e}") from e

        labels.extend(page)
        url = resp.links.get("next", {}).get("url")
        # The next link already carries the query string
        params = None

    return labels


def to_label_records(raw_labels):
    records = []
    for label in raw_labels:
        record = {
            "name": label["name"],
            "color": label["color"],
            "description": label.get("description"),
        }
        for field in EXTRA_FIELDS:
            record[field] = None
        records.append(record)
    return records


def write_labels(records, path):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(records, f, sort_keys=False, allow_unicode=True)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Dump repository labels to a YAML file")
    p.add_argument("org", help="Repository owner")
    p.add_argument("repo", help="Repository name")
    p.add_argument("-o", "--output", default="label.yaml", help="Output file path")
    p.add_argument("--token", default=Config.GITHUB_TOKEN, help="GitHub token (default: $GITHUB_TOKEN)")
    args = p.parse_args(argv)

    logger.info(f"Start listing labels | repo={args.org}/{args.repo}")
    try:
        raw_labels = fetch_labels(args.org, args.repo, args.token)
    except LabelDumpError as e:
        logger.error(str(e))
        print(e, file=sys.stderr)
        return 1

    records = to_label_records(raw_labels)
    try:
        write_labels(records, args.output)
    except OSError as e:
        logger.error(f"Failed to write {args.output}: {e}")
        print(f"Failed to write {args.output}: {e}", file=sys.stderr)
        return 1

    logger.info(f"Dumping completed | labels={len(records)} | file={args.output}")
    print(f"Wrote {len(records)} labels to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI commands for poking at the API and checking webhook deliveries."""

import argparse
import logging
import sys
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Query the GitHub REST API and validate webhook payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each request (DEBUG level)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # machines subcommand
    machines_parser = subparsers.add_parser(
        "machines",
        help="List codespace machine types for a repository",
    )
    machines_parser.add_argument("owner", help="Repository owner")
    machines_parser.add_argument("repo", help="Repository name")
    machines_parser.add_argument(
        "--ref",
        default=None,
        help="Branch or commit to check prebuild availability for",
    )
    machines_parser.add_argument(
        "--location",
        default=None,
        help="Azure region for the codespace (e.g., WestUs2)",
    )

    # budgets subcommand
    budgets_parser = subparsers.add_parser(
        "budgets",
        help="List an organization's billing budgets, or show one",
    )
    budgets_parser.add_argument("org", help="Organization login")
    budgets_parser.add_argument(
        "budget_id",
        nargs="?",
        default=None,
        help="Budget ID (default: list all budgets)",
    )

    # secrets subcommand
    secrets_parser = subparsers.add_parser(
        "secrets",
        help="List Actions secret names for a repository",
    )
    secrets_parser.add_argument("owner", help="Repository owner")
    secrets_parser.add_argument("repo", help="Repository name")

    # webhook subcommand
    webhook_parser = subparsers.add_parser(
        "webhook",
        help="Validate and parse a saved webhook payload",
    )
    webhook_parser.add_argument(
        "payload_file",
        type=Path,
        help="File holding the raw JSON request body",
    )
    webhook_parser.add_argument(
        "--event",
        required=True,
        help="X-GitHub-Event value (e.g., push, issues)",
    )
    webhook_parser.add_argument(
        "--signature",
        default="",
        help="X-Hub-Signature-256 value (e.g., sha256=...)",
    )
    webhook_parser.add_argument(
        "--secret",
        default="",
        help="Webhook secret the signature was computed with",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from .errors import GitHubError
    from .strings import stringify

    try:
        if args.command == "machines":
            from .client import get_client
            from .codespaces_machines import ListMachinesOptions

            opts = ListMachinesOptions(ref=args.ref, location=args.location)
            machines, _ = get_client().codespaces.list_machine_types_for_repository(args.owner, args.repo, opts)
            print(stringify(machines))
        elif args.command == "budgets":
            from .client import get_client

            billing = get_client().billing
            if args.budget_id:
                budget, _ = billing.get_organization_budget(args.org, args.budget_id)
                print(stringify(budget))
            else:
                budgets, _ = billing.list_organization_budgets(args.org)
                print(stringify(budgets))
        elif args.command == "secrets":
            from .client import get_client

            secrets, _ = get_client().actions.list_repo_secrets(args.owner, args.repo)
            print(stringify(secrets))
        elif args.command == "webhook":
            from .messages import parse_webhook, validate_payload_from_body

            body = args.payload_file.read_bytes()
            payload = validate_payload_from_body("application/json", body, args.signature, args.secret)
            event = parse_webhook(args.event, payload)
            print(stringify(event))
        else:
            parser.print_help()
            return 2
    except GitHubError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

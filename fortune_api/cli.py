"""
Fortune table administration CLI

The HTTP API is read-only, so fortunes are loaded and removed with this tool.
It talks to the same table the API serves, using the same environment
configuration.

Usage:
    fortune-admin [command] [options]

Commands:
    init        - Create the fortunes table if it does not exist
    add         - Insert or replace a fortune:   add ID NAME
    get         - Show one fortune:              get ID
    delete      - Delete a fortune:              delete ID
    list        - Show every fortune (first scan page)
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DynamoDBConfig, ServerConfig
from .core import create_table_gateway
from .exceptions import FortuneApiError, ItemNotFoundError
from .handlers import FortuneReadApi, FortuneWriteApi
from .main import configure_logging, ensure_table
from .models import Fortune

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fortune-admin",
        description="Manage the fortunes table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--table",
        help="Base table name (defaults to FORTUNE_TABLE_NAME or fortune-of-the-day)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the table if missing")

    add_parser = subparsers.add_parser("add", help="Insert or replace a fortune")
    add_parser.add_argument("id", type=int)
    add_parser.add_argument("name")

    get_parser = subparsers.add_parser("get", help="Show one fortune")
    get_parser.add_argument("id", type=int)

    delete_parser = subparsers.add_parser("delete", help="Delete a fortune")
    delete_parser.add_argument("id", type=int)

    subparsers.add_parser("list", help="Show every fortune")

    return parser


def run(args: argparse.Namespace, dynamodb_config: DynamoDBConfig, table_name: str) -> int:
    """Execute one parsed command. Returns the process exit status."""
    gateway = create_table_gateway(dynamodb_config, table_name)
    read_api = FortuneReadApi(gateway)
    write_api = FortuneWriteApi(gateway)

    try:
        if args.command == "init":
            created = ensure_table(gateway)
            print(f"✅ Table {gateway.table_name} {'created' if created else 'already exists'}")
        elif args.command == "add":
            fortune = write_api.put(Fortune(id=args.id, name=args.name))
            print(f"✅ Stored fortune {fortune.id}")
        elif args.command == "get":
            print(json.dumps(read_api.get(args.id).model_dump()))
        elif args.command == "delete":
            write_api.delete(Fortune(id=args.id))
            print(f"✅ Deleted fortune {args.id}")
        elif args.command == "list":
            print(json.dumps([fortune.model_dump() for fortune in read_api.scan()], indent=2))
    except ItemNotFoundError:
        print(f"❌ Fortune {args.id} not found")
        return 1
    except FortuneApiError as e:
        print(f"❌ {args.command} failed: {e}")
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    dynamodb_config = DynamoDBConfig.from_env()
    configure_logging(args.verbose or dynamodb_config.enable_debug_logging)
    table_name = args.table or ServerConfig.from_env().table_name

    sys.exit(run(args, dynamodb_config, table_name))


if __name__ == "__main__":
    main()

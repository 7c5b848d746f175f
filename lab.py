import argparse
import logging
import sys

from cqlab.basic_operations import lab as basic_operations_lab
from cqlab.output import display
from cqlab.exercises import IGNORED
from cqlab.renderers import renderer_registry
from cqlab.session import SessionConfig, open_session


def load_config(args: argparse.Namespace) -> SessionConfig:
    """Environment configuration overridden by command-line options."""
    try:
        config = SessionConfig.from_env()
    except ValueError as exc:
        sys.exit(f"Error: {exc}")

    if args.host:
        config.contact_points = list(args.host)
    if args.port is not None:
        config.port = args.port
    if args.datacenter:
        config.local_dc = args.datacenter
    return config


def cmd_run(args: argparse.Namespace) -> int:
    """Run the basic operations lab against a live cluster.

    Returns 0 when every exercise that ran passed its checks.
    """
    config = load_config(args)
    renderer = renderer_registry.create(args.format)

    try:
        with open_session(config) as session:
            results = basic_operations_lab.run(session, renderer=renderer)
    except ConnectionError as exc:
        sys.exit(f"Error: {exc}")

    ran = [r for r in results if r.status != IGNORED]
    passed = [r for r in ran if r.ok]
    print(f"\n{len(passed)}/{len(ran)} exercise(s) passed")
    return 0 if len(passed) == len(ran) else 1


def cmd_query(args: argparse.Namespace) -> int:
    """Execute one CQL statement and print its result."""
    if not getattr(args, "cql", None):
        sys.exit("Error: No statement provided. Usage: lab.py query CQL")

    config = load_config(args)
    renderer = renderer_registry.create(args.format)

    try:
        with open_session(config) as session:
            display(session.execute(args.cql), renderer=renderer)
    except ConnectionError as exc:
        sys.exit(f"Error: {exc}")

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lab.py",
        description="Guided exercises against a Cassandra cluster.",
    )

    # Global options
    parser.add_argument(
        "--format",
        choices=renderer_registry.keys(),
        default="ascii",
        help="Output format for result tables (default: ascii).",
    )
    parser.add_argument(
        "--host",
        action="append",
        metavar="HOST",
        help="Contact point; repeat for several (default: $CQLAB_CONTACT_POINTS or localhost).",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Native protocol port (default: $CQLAB_PORT or 9042).",
    )
    parser.add_argument(
        "--datacenter",
        help="Local datacenter name (default: $CQLAB_LOCAL_DC or datacenter1).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log driver and connection details.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # run subcommand
    run = subparsers.add_parser(
        "run",
        help="Run the basic operations lab.",
    )
    run.set_defaults(func=cmd_run)

    # query subcommand
    query = subparsers.add_parser(
        "query",
        help="Execute a CQL statement and display the result.",
    )
    query.add_argument(
        "cql",
        metavar="CQL",
        help="Statement to execute.",
    )
    query.set_defaults(func=cmd_query)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

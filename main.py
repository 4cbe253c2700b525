import argparse
import sys

from finguru.api.app import run as run_api
from finguru.validation.check import main as run_check
from finguru.validation.validator import SHAPES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FinGuru intake entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "validate"],
        default="api",
        help="Run mode: api (default), validate",
    )
    parser.add_argument(
        "--shape",
        choices=sorted(SHAPES),
        help="Request shape to validate against (validate mode)",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="JSON payload to validate; '-' or omitted reads stdin",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.mode == "api":
        run_api()
        return

    if not args.shape:
        parser.error("--shape is required in validate mode")

    sys.exit(run_check(args.shape, args.file))


if __name__ == "__main__":
    main()

"""
Matrix calculator CLI - generate and add matrices from the terminal, or run the server.
"""

import argparse
import logging
import sys

from src import load_settings
from src.converter import DataConverter
from src.domain.calculator_state import CalculatorStateError, apply_add, apply_generate
from src.models.dc_models import CalculatorStateModel

logging.basicConfig(
    level=getattr(logging, load_settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Matrix Calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 3x3 sum and product matrices and add them
  python -m src.cli generate --rows 3 --columns 3 --add

  # Run the HTTP server
  python -m src.cli serve --port 8080
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate the sum and product matrices")
    # Kept as strings so the calculator reports missing or non-numeric input itself
    generate_parser.add_argument("--rows", help="Row count (1-10)")
    generate_parser.add_argument("--columns", help="Column count (1-10)")
    generate_parser.add_argument(
        "--add",
        action="store_true",
        help="Also print the element-wise sum of both matrices",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port (default: 8080)")

    return parser.parse_args(argv)


def run_generate(args) -> int:
    converter = DataConverter()
    state = CalculatorStateModel()
    try:
        state = apply_generate(state, args.rows, args.columns)
        if args.add:
            state = apply_add(state)
    except CalculatorStateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Generated {state.dimensions.rows}x{state.dimensions.columns} matrices")
    print(converter.render_state(state), end="")
    return 0


def run_serve(args) -> int:
    import uvicorn

    uvicorn.run("src.main:app", host=args.host, port=args.port)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.command == "generate":
        return run_generate(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for tint."""

import sys
import traceback

from tint.cli import main


def run() -> None:
    """Run the CLI with standard Python tracebacks."""
    try:
        exit_code = main()
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    run()

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from file_navigator.adapters.console.rich_console_adapter import RichConsoleAdapter
from file_navigator.config.settings import Settings
from file_navigator.container import container
from file_navigator.exceptions import ConfigurationError


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-navigator",
        description=(
            "Browse a directory tree with LIST, SHOW, OPEN, DETAIL, BACK and EXIT."
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Directory to start in; BACK stops here (default: FILE_NAVIGATOR_ROOT or cwd)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level on stderr (default: FILE_NAVIGATOR_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors in the output",
    )
    args = parser.parse_args(argv)

    settings = Settings(root=args.root, log_level=args.log_level)
    try:
        root = settings.validate_root()
        level = settings.logging_level()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.no_color:
        container.set_console(RichConsoleAdapter(Console(no_color=True)))

    session = container.get_browse_session_use_case()
    session.run(root)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""
MiniGFM command line interface: convert a Markdown file to an HTML fragment.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import HIGHLIGHT_BACKENDS, ConfigManager
from .exceptions import ConfigError
from .logging_utils import initLogging
from .parser import MiniGFM

# Configure basic logging first, stdout is reserved for the HTML
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="MiniGFM - convert GitHub-Flavored Markdown to HTML")
    parser.add_argument(
        "input",
        nargs="?",
        help="Markdown file to convert (default: read from stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write HTML to (default: stdout)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to TOML configuration file",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "--unsafe",
        action="store_true",
        default=None,
        help="Pass raw HTML through without escaping or sanitising",
    )
    parser.add_argument(
        "--highlight",
        choices=HIGHLIGHT_BACKENDS,
        help="Syntax highlighting backend for fenced code blocks",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the converter, returns process exit status."""
    args = parse_arguments(argv)

    configManager = ConfigManager(args.config, args.config_dir)
    initLogging(configManager.getLoggingConfig())

    if args.unsafe is not None:
        configManager.setParserOption("unsafe", args.unsafe)
    if args.highlight is not None:
        configManager.setParserOption("highlight", args.highlight)

    if args.print_config:
        print(json.dumps(configManager.config, indent=2, sort_keys=True, default=str))
        return 0

    try:
        options = configManager.getParserOptions()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        if args.input:
            with open(args.input, "r", encoding="utf-8") as f:
                markdown = f.read()
        else:
            markdown = sys.stdin.read()
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    html = MiniGFM(options).parse(markdown)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as e:
            logger.error(f"Failed to write output: {e}")
            return 1
        logger.info(f"Wrote {len(html)} characters to {args.output}")
    else:
        sys.stdout.write(html)

    return 0

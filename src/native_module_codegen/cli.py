"""Command-line interface for generating Objective-C++ headers from native module schemas."""

from __future__ import annotations

import argparse
import logging
import os.path
from collections.abc import Sequence

from native_module_codegen.errors import CodegenError
from native_module_codegen.run import run

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(description="Generate an Objective-C++ header for native module schemas.")

    parser.add_argument(
        "-s",
        "--schema",
        type=str,
        required=True,
        help="path to the codegen JSON schema.",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        default="",
        help="directory to write the generated header to; defaults to the schema's directory if omitted.",
    )

    parser.add_argument(
        "-n",
        "--module-spec-name",
        type=str,
        default="",
        help="name of the generated header, without extension; defaults to the schema file name.",
    )

    parser.add_argument(
        "-l",
        "--library-name",
        type=str,
        default="",
        help="name of the library the schema belongs to; defaults to the schema file name.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the header generator.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    logging.basicConfig(level=logging.INFO)

    root_directory = os.getcwd()
    logging.info("Working from root directory: %s", root_directory)

    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        run(args, root_directory)
    except CodegenError as e:
        logger.error("Header generation failed: %s", e)
        return 1

    return 0

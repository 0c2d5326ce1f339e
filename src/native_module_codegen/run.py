"""Top-level module for header generation."""

from __future__ import annotations

import argparse
import logging
import os.path

from native_module_codegen.generator import FilesOutput, generate
from native_module_codegen.loader import load_schema

logger = logging.getLogger(__name__)


def write_outputs(files: FilesOutput, output_directory: str) -> list[str]:
    """Write generated files into a directory, creating it if needed.

    Args:
        files (FilesOutput): Mapping from file name to content.
        output_directory (str): The directory to write to.

    Returns:
        list[str]: The paths of the written files.
    """
    os.makedirs(output_directory, exist_ok=True)

    written: list[str] = []
    for file_name, content in files.items():
        output_path = os.path.join(output_directory, file_name)
        with open(output_path, "w", encoding="utf8") as output_file:
            output_file.write(content)
        written.append(output_path)

    return written


def run(args: argparse.Namespace, root_directory: str) -> list[str]:
    """Run the generator on one schema file.

    The library and header names default to the schema file name without extension, and the
    header is written next to the schema unless an output directory is given.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the generator.
        root_directory (str): The directory, from which the generator is executed.

    Returns:
        list[str]: The paths of the written files.
    """
    schema_path = os.path.join(root_directory, args.schema)
    schema_stem = os.path.splitext(os.path.basename(schema_path))[0]

    library_name: str = getattr(args, "library_name", "") or schema_stem
    module_spec_name: str = getattr(args, "module_spec_name", "") or schema_stem
    output_dir: str = getattr(args, "output_dir", "")

    if output_dir:
        output_directory = os.path.join(root_directory, output_dir)
    else:
        output_directory = os.path.dirname(schema_path)

    schema = load_schema(schema_path)
    logger.info("Loaded schema '%s' with %d native module(s).", schema_path, len(schema.native_modules()))

    written = write_outputs(generate(library_name, schema, module_spec_name), output_directory)
    for path in written:
        logger.info("Wrote header to '%s'.", path)

    return written

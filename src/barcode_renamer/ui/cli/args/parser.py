"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from barcode_renamer.config.config import Config
from barcode_renamer.features.classification import (
    DuplicatePolicy,
    MissingPolicy,
    SymbolFormat,
)
from barcode_renamer.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from barcode_renamer.ui.cli.args.options import CLIArgs, FormatsArgs, RenameArgs
from barcode_renamer.ui.cli.labels import DUPLICATE_POLICY_LABELS, MISSING_POLICY_LABELS


def _describe_choices(labels: dict[DuplicatePolicy, str] | dict[MissingPolicy, str]) -> str:
    return "; ".join(f"{policy.value}: {label}" for policy, label in labels.items())


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="barcode-renamer",
            description="Copy images into a target folder, named after the barcodes they show.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        rename_parser = subparsers.add_parser(
            "rename",
            help="Decode every image in a folder and copy it under its barcode",
        )
        _ = rename_parser.add_argument(
            "source_path",
            type=str,
            help="Directory containing the images",
            metavar="SOURCE_DIR",
        )
        _ = rename_parser.add_argument(
            "--target",
            type=str,
            help="Target directory (defaults to a new 'renamed' folder inside SOURCE_DIR)",
            metavar="TARGET_DIR",
        )
        _ = rename_parser.add_argument(
            "--duplicates",
            type=str,
            choices=[policy.value for policy in DuplicatePolicy],
            help=(
                "How to name images carrying several codes "
                + f"({_describe_choices(DUPLICATE_POLICY_LABELS)}; default from config)"
            ),
        )
        _ = rename_parser.add_argument(
            "--missing",
            type=str,
            choices=[policy.value for policy in MissingPolicy],
            help=(
                "What to do with images without a code "
                + f"({_describe_choices(MISSING_POLICY_LABELS)}; default from config)"
            ),
        )
        _ = rename_parser.add_argument(
            "--format",
            type=str,
            dest="format_restriction",
            metavar="FORMAT",
            help="Only accept codes of this symbol format (see 'formats')",
        )
        _ = rename_parser.add_argument(
            "--try-harder",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Retry images without a code using a second binarizer (slower)",
        )
        _ = rename_parser.add_argument(
            "--export-unresolved",
            type=str,
            metavar="FILE",
            help="Write the absolute paths of unresolved images to FILE",
        )
        _ = rename_parser.add_argument(
            "--show-all-unresolved",
            action="store_true",
            help="List every unresolved image instead of a truncated preview",
        )
        _ = rename_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = rename_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        _ = subparsers.add_parser(
            "formats",
            help="List the symbol formats accepted by --format",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the source directory does not exist or a value is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "rename":
            return ArgumentParser._process_rename(parsed_args)

        if command == "formats":
            return FormatsArgs(command="formats")

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_rename(parsed_args: argparse.Namespace) -> RenameArgs:
        source_path = Path(parsed_args.source_path)
        if not source_path.exists() or not source_path.is_dir():
            logger.error("Source directory does not exist or is not a directory: %s", source_path)
            sys.exit(1)

        target_path = Path(parsed_args.target) if parsed_args.target else None
        if target_path is not None and target_path.exists() and not target_path.is_dir():
            logger.error("Target exists but is not a directory: %s", target_path)
            sys.exit(1)

        format_restriction: str | None = parsed_args.format_restriction
        if format_restriction is not None:
            try:
                format_restriction = SymbolFormat.from_user_input(format_restriction).value
            except ValueError as exc:
                logger.error("%s", exc)
                sys.exit(2)

        export_unresolved = (
            Path(parsed_args.export_unresolved) if parsed_args.export_unresolved else None
        )

        return RenameArgs(
            command="rename",
            source_path=source_path,
            target_path=target_path,
            duplicate_policy=parsed_args.duplicates,
            missing_policy=parsed_args.missing,
            format_restriction=format_restriction,
            try_harder=parsed_args.try_harder,
            export_unresolved=export_unresolved,
            show_all_unresolved=parsed_args.show_all_unresolved,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

"""Command line interface for the barcode renamer."""

import sys
from typing import final

from barcode_renamer.features.classification import (
    FileStatus,
    RunResult,
    TargetDirectoryError,
)
from barcode_renamer.platform.logging import logger
from barcode_renamer.ui.cli.args import ArgumentParser
from barcode_renamer.ui.cli.args.options import CLIArgs, RenameArgs
from barcode_renamer.ui.cli.commands import FormatsCommand, RenameCommand

EXIT_CANCELLED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, RenameArgs):
                result = RenameCommand(args).execute()
                exit_code = CommandProcessor.exit_code_for(result)
                if exit_code:
                    sys.exit(exit_code)
                return

            _ = FormatsCommand().execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_CANCELLED)
        except TargetDirectoryError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def exit_code_for(result: RunResult) -> int:
        """Map a finished run to a process exit code.

        Images that were skipped or copied under their original name are a
        normal outcome; only copy failures make the run fail.
        """

        if result.cancelled:
            return EXIT_CANCELLED
        if result.count(FileStatus.FAILED):
            return 1
        return 0


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` for failures and cancellation, so this return is
        only reached when the run completes cleanly.
    """
    CommandProcessor.process_command()
    return 0

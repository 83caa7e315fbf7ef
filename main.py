import argparse
import logging
import sys

from tqdm import tqdm

from snippet_checker import CheckerConfig, CheckPipeline, ErrorHandler, TerminalReporter
from snippet_checker.exceptions import SnippetCheckError


logger = logging.getLogger("snippet_checker")

EXIT_OK = 0
EXIT_DIFF = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that code snippets in the book match the source files they quote"
    )
    parser.add_argument(
        "--book-dir",
        help="Directory holding the markdown sources (default: $SNIPPET_BOOK_DIR or ../src)",
    )
    parser.add_argument(
        "--code-dir",
        help="Root of the source tree (default: $CODE_DIR)",
    )
    parser.add_argument(
        "--crates-dir",
        help="Subdirectory of the code dir that snippet paths are relative to (default: crates)",
    )
    parser.add_argument(
        "--language",
        help="Fence language tag of annotated snippets (default: rust)",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        help="Spaces in one indentation level (default: 4)",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable colored output (colors are forced on by default for CI logs)",
    )
    parser.add_argument(
        "--progress",
        dest="show_progress",
        action="store_true",
        default=None,
        help="Show a progress bar while checking documents",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    error_handler = ErrorHandler(args.log_level or "WARNING")
    reporter = TerminalReporter(color=args.color is not False)

    try:
        config = CheckerConfig.from_env(
            book_dir=args.book_dir,
            code_dir=args.code_dir,
            crates_dir=args.crates_dir,
            language=args.language,
            indent_width=args.indent_width,
            color=args.color,
            show_progress=args.show_progress,
            log_level=args.log_level,
        )
        error_handler.setup_logging(config.log_level)
        reporter.color = config.color

        with tqdm(unit="doc", disable=not config.show_progress, leave=False) as progress:

            def on_document_complete(report, index, total):
                progress.total = total
                reporter.document_complete(report, index, total)
                progress.update(1)

            summary = CheckPipeline(config).run(on_document_complete=on_document_complete)
    except (SnippetCheckError, OSError) as exc:
        reporter.fatal(error_handler.handle_fatal(exc))
        return EXIT_FATAL
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_FATAL

    reporter.final_status(summary)
    if summary.passed:
        return EXIT_OK

    logger.debug("%d snippets differ from the code", summary.mismatch_count)
    return EXIT_DIFF


if __name__ == "__main__":
    sys.exit(main())

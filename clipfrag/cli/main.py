"""clipfrag command-line entry point.

Flow:
    parse args -> load config -> read + decode input -> DocumentState
    -> TransferSession.run() on the system clipboard -> exit code

Exit codes: 0 after quitting from any prompt, 1 for any ClipfragError
(config, input, decoding, clipboard, stalled packing), 130 on Ctrl+C.
"""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from clipfrag.cli.arg_parser import parse_args, resolve_budget
from clipfrag.cli.logs import configure_logging
from clipfrag.cli.tty import TerminalReader
from clipfrag.clipboard.system import SystemClipboard
from clipfrag.clipboard.types import ClipboardSink
from clipfrag.config.loader import load_config
from clipfrag.config.schema import Config
from clipfrag.core.encoding import configure_stdio, decode_input
from clipfrag.core.errors import ClipfragError, InputError
from clipfrag.display import PromptPrinter, get_console
from clipfrag.document.state import DocumentState
from clipfrag.transfer.session import TransferSession
from clipfrag.transfer.types import LineReader, TransferResult

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def read_input(path: Path | None) -> bytes:
    """Read the whole document from a file or, without a path, from stdin.

    Raises:
        InputError: If the source cannot be read.
    """
    if path is None:
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise InputError(f"Failed to read standard input: {e}") from e
    try:
        return path.read_bytes()
    except OSError as e:
        raise InputError(f"Failed to read {path}: {e.strerror or e}") from e


def run(
    argv: Sequence[str] | None = None,
    sink: ClipboardSink | None = None,
    reader: LineReader | None = None,
) -> int:
    """Run clipfrag and return the process exit code.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).
        sink: Clipboard to use. Defaults to the system clipboard.
        reader: Answer source. Defaults to the controlling terminal.
    """
    args = parse_args(argv)
    console = get_console()
    configure_logging(args.verbose, console)
    printer = PromptPrinter(console)

    try:
        config = load_config(args.config)
        unit_kind, max_units = resolve_budget(args, config)

        text, encoding = decode_input(read_input(args.input_file))
        printer.info(f"encoding: {encoding}")

        source = str(args.input_file) if args.input_file is not None else None
        state = DocumentState.from_text(text, unit_kind, max_units, source_label=source)

        if reader is None:
            with TerminalReader.open(allow_stdin=args.input_file is not None) as tty:
                result = _transfer(state, sink, tty, printer, config)
        else:
            result = _transfer(state, sink, reader, printer, config)
    except ClipfragError as e:
        printer.error(e.message)
        return EXIT_ERROR
    except KeyboardInterrupt:
        printer.end_line()
        printer.info("Interrupted")
        return EXIT_INTERRUPTED

    logger.debug(
        "Quit in %s phase at line %d/%d after %d clipboard writes",
        result.quit_phase.value, result.cursor, result.line_count, result.deliveries,
    )
    return result.exit_code


def _transfer(
    state: DocumentState,
    sink: ClipboardSink | None,
    reader: LineReader,
    printer: PromptPrinter,
    config: Config,
) -> TransferResult:
    session = TransferSession(
        state,
        sink if sink is not None else SystemClipboard(),
        reader,
        printer,
        messages=config.messages,
        policy=config.policy,
    )
    return session.run()


def main() -> None:
    """Entry point for the clipfrag CLI."""
    configure_stdio()
    raise SystemExit(run())


if __name__ == "__main__":
    main()

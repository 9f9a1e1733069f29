"""Command line interface: flags, interactive prompts, and the batch run."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable

from duskicons import __version__
from duskicons.app import configure_logger, run_preview
from duskicons.config.settings import AppSettings
from duskicons.config.token_map import load_token_map
from duskicons.core.constants import ALL_ICONS
from duskicons.core.converter import (
    ConversionJob,
    IconConverter,
    IconResult,
    expand_home,
    parse_icon_list,
)
from duskicons.core.library import IconLibrary
from duskicons.core.palette import DEFAULT_TOKEN_MAP, Theme, is_hex_color
from duskicons.errors import (
    ERROR_MESSAGES,
    ConversionAbortedError,
    DuskIconsError,
    ErrorCode,
    ThemeValidationError,
    format_error_for_user,
)

logger = logging.getLogger("duskicons.cli")

# A validator returns True when the answer is accepted, else the message to show.
Validator = Callable[[str], "bool | str"]

EMPTY_ICON_LIST = "Please enter at least one icon name."


def succeed(msg: str) -> None:
    print(f"✔ {msg}")


def fail(msg: str) -> None:
    print(f"✖ {msg}")


class PromptCancelled(Exception):
    """Raised when the user aborts a prompt with Ctrl-C or end of input."""


class Prompter:
    """Asks questions on the terminal, re-asking until the answer validates."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def ask_text(self, message: str, initial: str = "", validate: Validator | None = None) -> str:
        prompt = f"? {message} ({initial}) " if initial else f"? {message} "
        while True:
            try:
                raw = self._input(prompt)
            except (KeyboardInterrupt, EOFError) as exc:
                raise PromptCancelled() from exc
            value = raw.strip() or initial
            if validate is not None:
                verdict = validate(value)
                if verdict is not True:
                    self._output(f"  {verdict}")
                    continue
            return value

    def ask_list(self, message: str, initial: str = "", separator: str = ",") -> list[str]:
        while True:
            names = parse_icon_list(self.ask_text(message, initial), separator)
            if names:
                return names
            self._output(f"  {EMPTY_ICON_LIST}")


def validate_output_dir(value: str) -> bool | str:
    if not Path(expand_home(value)).is_dir():
        return "This output path does not exist."
    return True


def validate_hex(value: str) -> bool | str:
    if not is_hex_color(value):
        return ERROR_MESSAGES[ErrorCode.COLOR_INVALID]
    return True


def collect_job(prompter: Prompter, settings: AppSettings, library: IconLibrary) -> ConversionJob:
    """Ask for every answer, then build the job once they all validate."""
    output = prompter.ask_text("Output directory:", settings.output_dir, validate_output_dir)
    fg = prompter.ask_text("Primary foreground color:", settings.foreground_primary, validate_hex)
    fg2 = prompter.ask_text("Secondary foreground color:", settings.foreground_secondary, validate_hex)
    bg = prompter.ask_text("Background color:", settings.background, validate_hex)
    icons = prompter.ask_list("Enter icons to generate:", ALL_ICONS)

    theme = Theme(background=bg, foreground_primary=fg, foreground_secondary=fg2)
    settings.output_dir = output
    settings.foreground_primary = fg
    settings.foreground_secondary = fg2
    settings.background = bg
    settings.sync()
    return ConversionJob.create(output, theme, icons, library)


def report_result(result: IconResult) -> None:
    if result.ok:
        succeed(result.message)
    else:
        fail(result.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dusk-icons",
        description="Recolor the bundled icons and export them as 512x512 PNG files.",
    )
    parser.add_argument("-v", "--version", action="version", version=__version__,
                        help="Show application version")
    parser.add_argument("--preview", action="store_true",
                        help="Open the preview window instead of prompting")
    parser.add_argument("--tokens", type=Path, default=None,
                        help="YAML file mapping placeholder colors to theme fields")
    return parser


def main(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
    prompter: Prompter | None = None,
    library: IconLibrary | None = None,
) -> int:
    """Run the tool and return the process exit status."""
    args = build_parser().parse_args(argv)
    settings = settings or AppSettings()
    configure_logger(settings.log_dir)

    token_map = DEFAULT_TOKEN_MAP
    tokens_file = args.tokens or (Path(settings.tokens_file) if settings.tokens_file else None)
    if tokens_file is not None:
        try:
            token_map = load_token_map(tokens_file)
        except ThemeValidationError as exc:
            logger.warning("rejected token map %s: %s", tokens_file, exc.message)
            fail(format_error_for_user(exc))
            return 1
        if args.tokens is not None:
            settings.tokens_file = str(args.tokens)
            settings.sync()

    if args.preview:
        return run_preview(settings, token_map)

    library = library or IconLibrary()
    try:
        job = collect_job(prompter or Prompter(), settings, library)
    except PromptCancelled:
        fail(ERROR_MESSAGES[ErrorCode.OPERATION_CANCELLED])
        return 1
    except DuskIconsError as exc:
        fail(format_error_for_user(exc))
        return 1

    logger.info("converting %d icon(s) into %s", len(job.icons), job.output_dir)
    converter = IconConverter(library, token_map=token_map)
    try:
        report = converter.run(job, on_result=report_result)
    except ConversionAbortedError as exc:
        logger.exception("conversion of %s failed: %s", exc.icon, exc.message)
        return 1

    logger.info("finished: %d generated, %d failed", report.generated, report.failed)
    return 0

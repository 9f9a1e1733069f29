"""Batch conversion: theme each requested icon and rasterize it to PNG."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator

from duskicons.core.constants import (
    ALL_ICONS,
    OUTPUT_HEIGHT,
    OUTPUT_WIDTH,
    PNG_EXTENSION,
    TMP_SUFFIX,
)
from duskicons.core.library import IconLibrary, normalize_icon_name
from duskicons.core.palette import DEFAULT_TOKEN_MAP, ColorTokenMap, Theme, recolor_svg
from duskicons.core.rasterizer import SvgRasterizer
from duskicons.errors import (
    ConversionAbortedError,
    DuskIconsError,
    ErrorCode,
    classify_exception,
)

logger = logging.getLogger(__name__)


class IconStatus(Enum):
    GENERATED = "generated"
    MISSING = "missing"
    TEMP_WRITE_FAILED = "temp_write_failed"
    NO_OUTPUT = "no_output"


@dataclass(frozen=True, slots=True)
class IconResult:
    """Outcome of converting a single icon."""
    name: str
    status: IconStatus
    message: str
    output_path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.status is IconStatus.GENERATED


@dataclass
class ConversionReport:
    """Per-icon results of a finished batch, in request order."""
    results: list[IconResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def generated(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    def output_paths(self) -> list[Path]:
        return [r.output_path for r in self.results if r.output_path is not None]


def expand_home(path: str) -> str:
    """Expand a leading ``~`` the way a shell would."""
    if path.startswith("~"):
        return str(Path(path).expanduser())
    return path


def parse_icon_list(raw: str, separator: str = ",") -> list[str]:
    """Split a comma separated answer into trimmed, non-empty icon names."""
    return [part.strip() for part in raw.split(separator) if part.strip()]


@dataclass(frozen=True, slots=True)
class ConversionJob:
    """An immutable batch request: where to write, which theme, which icons."""

    output_dir: Path
    theme: Theme
    icons: tuple[str, ...]

    @classmethod
    def create(
        cls,
        output_dir: str | Path,
        theme: Theme,
        requested: Iterable[str],
        library: IconLibrary,
    ) -> ConversionJob:
        """Build a job from already validated answers.

        ``~`` in the output directory is expanded and a request containing
        ``all`` becomes every icon in the library.
        """
        output = Path(expand_home(str(output_dir)))
        if not output.is_dir():
            raise DuskIconsError(
                ErrorCode.PATH_INVALID,
                message="This output path does not exist.",
                path=output,
            )
        names = [name.strip() for name in requested if name.strip()]
        if ALL_ICONS in names:
            names = library.list_icons()
        return cls(output_dir=output, theme=theme, icons=tuple(names))


class _TemporaryWriteFailed(Exception):
    pass


@contextmanager
def temporary_svg(path: Path, svg: str) -> Iterator[Path]:
    """Write ``svg`` to ``path`` for the duration of the block, then delete it."""
    try:
        path.write_text(svg, encoding="utf-8")
    except OSError as exc:
        if path.is_file():
            path.unlink()
        raise _TemporaryWriteFailed(str(exc)) from exc
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


class IconConverter:
    """Runs conversion jobs one icon at a time."""

    def __init__(
        self,
        library: IconLibrary | None = None,
        rasterizer: SvgRasterizer | None = None,
        token_map: ColorTokenMap = DEFAULT_TOKEN_MAP,
    ) -> None:
        self._library = library or IconLibrary()
        self._rasterizer = rasterizer or SvgRasterizer()
        self._token_map = token_map

    @property
    def library(self) -> IconLibrary:
        return self._library

    def run(
        self,
        job: ConversionJob,
        on_result: Callable[[IconResult], None] | None = None,
        progress_cb: Callable[[int, int, str], None] | None = None,
    ) -> ConversionReport:
        """Convert every icon of ``job`` in order.

        Per-icon failures land in the report and the batch goes on. Anything
        unexpected raises ConversionAbortedError and ends the batch.
        """
        report = ConversionReport()
        total = len(job.icons)
        for i, requested in enumerate(job.icons):
            if progress_cb:
                progress_cb(i, total, requested)
            try:
                result = self.convert_icon(requested, job)
            except DuskIconsError as exc:
                raise ConversionAbortedError(requested, exc) from exc
            except Exception as exc:
                classified = classify_exception(exc, path=job.output_dir)
                raise ConversionAbortedError(requested, classified) from exc
            report.results.append(result)
            if on_result:
                on_result(result)
        if progress_cb:
            progress_cb(total, total, "Done")
        return report

    def convert_icon(self, requested: str, job: ConversionJob) -> IconResult:
        name = normalize_icon_name(requested)
        output_path = (job.output_dir / f"{name}{PNG_EXTENSION}").resolve()

        if not self._library.exists(name):
            logger.info("icon %s not found in %s", name, self._library.root)
            return IconResult(name, IconStatus.MISSING, f"Icon {name} does not exist.")

        icon = self._library.read(name)
        themed = recolor_svg(icon.svg, job.theme, self._token_map)
        tmp_path = (job.output_dir / f"{name}{TMP_SUFFIX}").resolve()

        try:
            with temporary_svg(tmp_path, themed) as tmp:
                written = self._rasterizer.convert_file(tmp, output_path, OUTPUT_WIDTH, OUTPUT_HEIGHT)
        except _TemporaryWriteFailed as exc:
            logger.warning("could not write %s: %s", tmp_path, exc)
            return IconResult(
                name,
                IconStatus.TEMP_WRITE_FAILED,
                f"Error creating temporary svg file for {name}.",
            )

        if not written:
            return IconResult(name, IconStatus.NO_OUTPUT, f"Icon {name} does not exist.")
        logger.info("generated %s at %s", name, written)
        return IconResult(
            name,
            IconStatus.GENERATED,
            f"Generated {name} icon at {written}",
            output_path=written,
        )

from logging import LogRecord
from pathlib import Path
from typing import ClassVar

import rich
from loguru import logger
from rich import progress
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.text import Text
from rich.theme import Theme

from xferfmt.size_format import FileSizeFormat


class _Highlighter(ReprHighlighter):
    highlights = [*ReprHighlighter.highlights, r'(?P<vb>\|)']  # noqa: RUF012


class _RichHandler(RichHandler):
    LEVELS: ClassVar[dict[str, int]] = {
        'TRACE': 5,
        'DEBUG': 10,
        'INFO': 20,
        'SUCCESS': 25,
        'WARNING': 30,
        'ERROR': 40,
        'CRITICAL': 50,
    }
    BLANK_NO = 21
    _NEW_LVLS: ClassVar[dict[int, str]] = {5: 'TRACE', 25: 'SUCCESS', BLANK_NO: ''}

    def emit(self, record: LogRecord) -> None:
        if name := self._NEW_LVLS.get(record.levelno, None):
            record.levelname = name

        return super().emit(record)


cnsl = rich.get_console()
cnsl.push_theme(Theme({'logging.level.success': 'blue', 'repr.vb': 'bold blue'}))


def set_logger(
    level: int | str = 20,
    *,
    log_file: str | Path | None = None,
    rich_tracebacks=False,
    **kwargs,
):
    if isinstance(level, str):
        try:
            level = _RichHandler.LEVELS[level.upper()]
        except KeyError as e:
            msg = f'`{level}` not in {list(_RichHandler.LEVELS.keys())}'
            raise KeyError(msg) from e

    logger.remove()

    _handler = _RichHandler(
        console=cnsl,
        highlighter=_Highlighter(),
        markup=False,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )
    logger.add(_handler, level=level, format='{message}', **kwargs)

    if log_file is not None:
        logger.add(
            log_file,
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8-SIG',
        )

    return level


class TransferSizeColumn(progress.ProgressColumn):
    """전송량/전체 크기 (e.g. "0.5/1.0 kB")."""

    def __init__(self, size_format: FileSizeFormat | None = None) -> None:
        self.size_format = size_format or FileSizeFormat()
        super().__init__()

    def render(self, task: progress.Task) -> Text:
        completed = int(task.completed)
        total = -1 if task.total is None else int(task.total)

        # rich는 completed > total 허용
        total = max(total, completed) if total >= 0 else total

        return Text(
            self.size_format.format_progress(completed, total),
            style='progress.download',
        )


class TransferProgress(progress.Progress):
    def __init__(
        self,
        *columns: str | progress.ProgressColumn,
        size_format: FileSizeFormat | None = None,
        **kwargs,
    ) -> None:
        self.size_format = size_format or FileSizeFormat()
        super().__init__(
            *(columns or self.transfer_columns(self.size_format)),
            **kwargs,
        )

    @staticmethod
    def transfer_columns(
        size_format: FileSizeFormat,
    ) -> tuple[progress.ProgressColumn, ...]:
        return (
            progress.TextColumn('[progress.description]{task.description}'),
            progress.BarColumn(bar_width=40),
            TransferSizeColumn(size_format),
            progress.TimeElapsedColumn(),
        )

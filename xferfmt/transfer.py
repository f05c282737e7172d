"""원격 저장소 업로드/다운로드 이벤트 출력."""

import dataclasses as dc
import enum
import time
from collections.abc import Callable

from loguru import logger
from rich.console import Console
from rich.progress import TaskID

from xferfmt.config import ReportConfig
from xferfmt.size_format import FileSizeFormat
from xferfmt.utils import TransferProgress, cnsl


class RequestType(enum.Enum):
    GET = 'GET'
    PUT = 'PUT'


@dc.dataclass(frozen=True)
class TransferResource:
    repository_id: str
    repository_url: str
    resource_name: str
    content_length: int = -1
    transfer_start_time: float = dc.field(default_factory=time.time)

    @property
    def url(self) -> str:
        return f'{self.repository_url}{self.resource_name}'


@dc.dataclass(frozen=True)
class TransferEvent:
    request_type: RequestType
    resource: TransferResource
    transferred_bytes: int = 0
    exception: BaseException | None = None

    @property
    def is_upload(self) -> bool:
        return self.request_type is RequestType.PUT


class TransferListener:
    def __init__(
        self,
        size_format: FileSizeFormat | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.size_format = size_format or FileSizeFormat()
        self.clock = clock

    def transfer_initiated(self, event: TransferEvent) -> None:
        pass

    def transfer_started(self, event: TransferEvent) -> None:
        pass

    def transfer_progressed(self, event: TransferEvent) -> None:
        pass

    def transfer_corrupted(self, event: TransferEvent) -> None:
        pass

    def transfer_succeeded(self, event: TransferEvent) -> None:
        pass

    def transfer_failed(self, event: TransferEvent) -> None:
        pass

    # ------------------------------------------------------------------
    # messages

    @staticmethod
    def _direction(event: TransferEvent, *, done: bool) -> str:
        if event.is_upload:
            return 'Uploaded to' if done else 'Uploading to'

        return 'Downloaded from' if done else 'Downloading from'

    def initiated_message(self, event: TransferEvent) -> str:
        r = event.resource
        return f'{self._direction(event, done=False)} {r.repository_id}: {r.url}'

    def problem_message(self, event: TransferEvent) -> str:
        r = event.resource
        return f'{event.exception} from {r.repository_id} for {r.url}'

    def throughput(self, event: TransferEvent) -> str:
        duration = self.clock() - event.resource.transfer_start_time

        if duration <= 0:
            return ''

        bytes_per_second = event.transferred_bytes / duration
        return f' at {self.size_format.format(int(bytes_per_second))}/s'

    def succeeded_message(self, event: TransferEvent) -> str:
        r = event.resource
        size = self.size_format.format(event.transferred_bytes)
        return (
            f'{self._direction(event, done=True)} {r.repository_id}: '
            f'{r.url} ({size}{self.throughput(event)})'
        )

    def progress(self, event: TransferEvent) -> str:
        transferred = event.transferred_bytes
        total = event.resource.content_length

        # 서버가 알린 크기보다 더 받은 경우 완료된 전송처럼 표기
        total = max(total, transferred) if total >= 0 else total

        return self.size_format.format_progress(transferred, total)


class QuietTransferListener(TransferListener):
    pass


class LoggingTransferListener(TransferListener):
    def transfer_initiated(self, event: TransferEvent) -> None:
        logger.info(self.initiated_message(event))

    def transfer_progressed(self, event: TransferEvent) -> None:
        logger.opt(lazy=True).debug(
            'Progress {}: {}',
            lambda: event.resource.url,
            lambda: self.progress(event),
        )

    def transfer_corrupted(self, event: TransferEvent) -> None:
        logger.warning(self.problem_message(event))

    def transfer_succeeded(self, event: TransferEvent) -> None:
        logger.info(self.succeeded_message(event))

    def transfer_failed(self, event: TransferEvent) -> None:
        logger.error(self.problem_message(event))


class ConsoleTransferListener(TransferListener):
    def __init__(
        self,
        console: Console | None = None,
        size_format: FileSizeFormat | None = None,
        clock: Callable[[], float] = time.time,
        *,
        show_progress: bool = True,
        progress: TransferProgress | None = None,
    ) -> None:
        super().__init__(size_format=size_format, clock=clock)
        self.console = console or cnsl

        if progress is None and show_progress:
            progress = TransferProgress(
                size_format=self.size_format, console=self.console, transient=True
            )

        self._progress = progress
        self._tasks: dict[str, TaskID] = {}

    @property
    def in_progress(self) -> tuple[str, ...]:
        return tuple(self._tasks)

    def println(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def _update(self, event: TransferEvent) -> None:
        if self._progress is None:
            return

        url = event.resource.url

        if (task := self._tasks.get(url)) is None:
            length = event.resource.content_length
            task = self._progress.add_task(
                description=event.resource.resource_name,
                total=length if length >= 0 else None,
            )
            self._tasks[url] = task
            self._progress.start()

        self._progress.update(task, completed=event.transferred_bytes)

    def _finish(self, event: TransferEvent) -> None:
        if self._progress is None:
            return

        if (task := self._tasks.pop(event.resource.url, None)) is not None:
            self._progress.remove_task(task)

        if not self._tasks:
            self._progress.stop()

    def transfer_initiated(self, event: TransferEvent) -> None:
        self.println(self.initiated_message(event))

    def transfer_started(self, event: TransferEvent) -> None:
        self._update(event)

    def transfer_progressed(self, event: TransferEvent) -> None:
        self._update(event)

    def transfer_corrupted(self, event: TransferEvent) -> None:
        self._finish(event)
        self.println(f'[WARNING] {self.problem_message(event)}')

    def transfer_succeeded(self, event: TransferEvent) -> None:
        self._finish(event)
        self.println(self.succeeded_message(event))

    def transfer_failed(self, event: TransferEvent) -> None:
        self._finish(event)
        self.println(f'[ERROR] {self.problem_message(event)}')


def create_listener(
    config: ReportConfig,
    console: Console | None = None,
) -> TransferListener:
    size_format = FileSizeFormat(config.locale)

    match config.mode:
        case 'console':
            return ConsoleTransferListener(
                console=console,
                size_format=size_format,
                show_progress=config.show_progress,
            )
        case 'log':
            return LoggingTransferListener(size_format=size_format)
        case 'quiet':
            return QuietTransferListener(size_format=size_format)
        case _:
            msg = f'{config.mode!r} not in ("console", "log", "quiet")'
            raise ValueError(msg)


def replay_transfer(
    listener: TransferListener,
    resource: TransferResource,
    size: int,
    *,
    request_type: RequestType = RequestType.GET,
    chunk: int = 8192,
) -> TransferEvent:
    """메모리 상에서 전송 이벤트 재현 (네트워크 접속 없음)."""
    if chunk <= 0:
        msg = f'chunk must be positive: {chunk}'
        raise ValueError(msg)

    def event(transferred: int):
        return TransferEvent(
            request_type=request_type,
            resource=resource,
            transferred_bytes=transferred,
        )

    logger.debug('Replay {} {} ({} bytes)', request_type.value, resource.url, size)

    listener.transfer_initiated(event(0))
    listener.transfer_started(event(0))

    for transferred in range(chunk, size + chunk, chunk):
        listener.transfer_progressed(event(min(transferred, size)))

    done = event(size)
    listener.transfer_succeeded(done)

    return done

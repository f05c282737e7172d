# ruff: noqa: DOC501

from pathlib import Path
from typing import Annotated

from cyclopts import App, Group, Parameter
from loguru import logger

from xferfmt import (
    FileSizeFormat,
    ReportConfig,
    RequestType,
    ScaleUnit,
    TransferResource,
    create_listener,
    replay_transfer,
    utils,
)
from xferfmt.config import Mode

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
    log_file: Path | None = None,
):
    utils.set_logger(level=10 if debug else 20, log_file=log_file)

    app(tokens)


def _print(text: str):
    utils.cnsl.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command(group='Format')
def size(
    size: int,
    *,
    unit: str | None = None,
    symbol: bool = True,
    locale: str = 'en',
):
    """
    파일 크기 표기.

    Parameters
    ----------
    size : int
        byte 단위 크기.
    unit : str | None, optional
        표기 단위 (B, kB, MB, GB). 미입력 시 자동 선택.
    symbol : bool, optional
        단위 기호 표기 여부.
    locale : str, optional
        소수점 기호 locale (e.g. en, de_DE).
    """
    su = None if unit is None else ScaleUnit.from_symbol(unit)
    text = FileSizeFormat(locale).format(size, su, symbol=symbol)
    _print(text)


@app.command(group='Format')
def progress(
    progressed: int,
    total: Annotated[int, Parameter(allow_leading_hyphen=True)] = -1,
    *,
    locale: str = 'en',
):
    """
    전송 진행 상황 표기.

    Parameters
    ----------
    progressed : int
        전송된 byte 수.
    total : int, optional
        전체 byte 수. 음수이면 크기 미상.
    locale : str, optional
        소수점 기호 locale.
    """
    text = FileSizeFormat(locale).format_progress(progressed, total)
    _print(text)


@app.command(group='Transfer')
def simulate(  # noqa: PLR0913
    size: int,
    *,
    chunk: int = 64 * 1024,
    upload: bool = False,
    repository: str = 'central',
    url: str = 'https://repo.maven.apache.org/maven2/',
    name: str = 'artifact.jar',
    unknown_length: bool = False,
    mode: Mode = 'console',
    bar: bool = True,
    locale: str = 'en',
):
    """
    전송 이벤트 출력 재현 (네트워크 접속 없음).

    Parameters
    ----------
    size : int
        전송할 byte 수.
    chunk : int, optional
        진행 이벤트 간격 (byte).
    upload : bool, optional
        업로드(PUT) 여부. 기본은 다운로드(GET).
    repository : str, optional
        저장소 ID.
    url : str, optional
        저장소 URL.
    name : str, optional
        리소스 이름.
    unknown_length : bool, optional
        전체 크기를 모르는 전송으로 처리.
    mode : Mode, optional
        출력 방식.
    bar : bool, optional
        진행 막대 표시 (console 모드).
    locale : str, optional
        소수점 기호 locale.
    """
    config = ReportConfig(locale=locale, mode=mode, show_progress=bar)
    listener = create_listener(config)
    resource = TransferResource(
        repository_id=repository,
        repository_url=url,
        resource_name=name,
        content_length=-1 if unknown_length else size,
    )

    logger.debug('config={}', config)

    replay_transfer(
        listener,
        resource,
        size,
        request_type=RequestType.PUT if upload else RequestType.GET,
        chunk=chunk,
    )


def main():
    app.meta()


if __name__ == '__main__':
    main()

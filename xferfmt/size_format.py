"""
SI 접두어(kB, MB, GB) 기반 파일 크기 표기.

1-10 사이 값은 `#0.0`, 그 외에는 `###0` 패턴으로 표기.

See Also
--------
https://en.wikipedia.org/wiki/Metric_prefix
https://en.wikipedia.org/wiki/Binary_prefix
"""

import enum
from decimal import ROUND_HALF_UP, Decimal

from babel import Locale
from babel.numbers import format_decimal


class InvalidArgumentError(ValueError):
    pass


def _validate(condition: bool, message: str, *args) -> None:  # noqa: FBT001
    if not condition:
        raise InvalidArgumentError(message.format(*args))


class ScaleUnit(enum.Enum):
    BYTE = (1, 'B')
    KILOBYTE = (1000, 'kB')
    MEGABYTE = (1000**2, 'MB')
    GIGABYTE = (1000**3, 'GB')

    def __init__(self, bytes_: int, symbol: str) -> None:
        self.bytes = bytes_
        self.symbol = symbol

    @classmethod
    def of(cls, size: int) -> 'ScaleUnit':
        _validate(size >= 0, 'File size cannot be negative: {}', size)

        for unit in reversed(cls):
            if size >= unit.bytes:
                return unit

        return cls.BYTE

    @classmethod
    def from_symbol(cls, value: str) -> 'ScaleUnit':
        key = value.strip().lower()

        for unit in cls:
            if key in {unit.symbol.lower(), unit.name.lower()}:
                return unit

        msg = f'`{value}` not in {[x.symbol for x in cls]}'
        raise InvalidArgumentError(msg)


def select_unit(size: int) -> ScaleUnit:
    return ScaleUnit.of(size)


class FileSizeFormat:
    SMALL = '#0.0'
    LARGE = '###0'

    def __init__(self, locale: str | Locale = 'en') -> None:
        self._locale = Locale.parse(locale)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self._locale)!r})'

    @property
    def locale(self) -> Locale:
        return self._locale

    def _render(self, value: float, pattern: str, digits: int) -> str:
        # `float -> str -> Decimal`: 최단 십진 표현 기준 반올림 (9.95 -> 10.0)
        number = Decimal(str(value)).quantize(
            Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP
        )
        return format_decimal(number, format=pattern, locale=self._locale)

    def small(self, value: float) -> str:
        return self._render(value, self.SMALL, 1)

    def large(self, value: float) -> str:
        return self._render(value, self.LARGE, 0)

    def format(
        self,
        size: int,
        unit: ScaleUnit | None = None,
        *,
        symbol: bool = True,
    ) -> str:
        """
        파일 크기 표기.

        Parameters
        ----------
        size : int
            byte 단위 크기.
        unit : ScaleUnit | None, optional
            표기 단위. `None`이면 `size`에 따라 자동 선택.
        symbol : bool, optional
            단위 기호 (" kB" 등) 표기 여부.

        Returns
        -------
        str
        """
        _validate(size >= 0, 'File size cannot be negative: {}', size)

        if unit is None:
            unit = ScaleUnit.of(size)

        scaled = size / unit.bytes
        suffix = f' {unit.symbol}' if symbol else ''

        if unit is ScaleUnit.BYTE:
            return self.large(size) + suffix

        # 반올림 전 값 기준: 9.96 -> "10.0", 10.0 -> "10"
        if scaled < 0.05 or scaled >= 10.0:  # noqa: PLR2004
            return self.large(scaled) + suffix

        return self.small(scaled) + suffix

    def format_progress(self, progressed: int, total: int) -> str:
        """
        전송 진행 상황 표기 (e.g. "0.5/1.0 kB").

        `total`이 음수(크기 미상)이거나 전송이 완료된 경우 `progressed`만 표기.
        """
        _validate(
            progressed >= 0, 'Progressed file size cannot be negative: {}', progressed
        )
        _validate(
            total < 0 or progressed <= total,
            'Progressed file size cannot be bigger than size: {} > {}',
            progressed,
            total,
        )

        if total >= 0 and progressed != total:
            unit = ScaleUnit.of(total)
            p = self.format(progressed, unit, symbol=False)
            t = self.format(total, unit)
            return f'{p}/{t}'

        return self.format(progressed)

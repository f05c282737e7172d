import pytest

from xferfmt.size_format import (
    FileSizeFormat,
    InvalidArgumentError,
    ScaleUnit,
    select_unit,
)


@pytest.fixture
def fmt() -> FileSizeFormat:
    return FileSizeFormat('en')


def test_unit_table():
    assert [(x.bytes, x.symbol) for x in ScaleUnit] == [
        (1, 'B'),
        (1000, 'kB'),
        (1000**2, 'MB'),
        (1000**3, 'GB'),
    ]


@pytest.mark.parametrize(
    ('size', 'unit'),
    [
        (0, ScaleUnit.BYTE),
        (999, ScaleUnit.BYTE),
        (1000, ScaleUnit.KILOBYTE),
        (999_999, ScaleUnit.KILOBYTE),
        (1_000_000, ScaleUnit.MEGABYTE),
        (999_999_999, ScaleUnit.MEGABYTE),
        (1_000_000_000, ScaleUnit.GIGABYTE),
        (10**15, ScaleUnit.GIGABYTE),
    ],
)
def test_select_unit_boundary(size: int, unit: ScaleUnit):
    assert select_unit(size) is unit
    assert ScaleUnit.of(size) is unit


def test_select_unit_monotonic():
    sizes = [0, 1, 500, 999, 1000, 1001, 54_321, 10**6, 7 * 10**8, 10**9, 10**12]
    units = [select_unit(x).bytes for x in sizes]

    assert units == sorted(units)


def test_select_unit_negative():
    with pytest.raises(InvalidArgumentError, match='cannot be negative: -1'):
        select_unit(-1)


@pytest.mark.parametrize(
    ('symbol', 'unit'),
    [
        ('B', ScaleUnit.BYTE),
        ('kb', ScaleUnit.KILOBYTE),
        ('kB', ScaleUnit.KILOBYTE),
        (' MB ', ScaleUnit.MEGABYTE),
        ('gigabyte', ScaleUnit.GIGABYTE),
    ],
)
def test_from_symbol(symbol: str, unit: ScaleUnit):
    assert ScaleUnit.from_symbol(symbol) is unit


def test_from_symbol_unknown():
    with pytest.raises(InvalidArgumentError, match='TB'):
        ScaleUnit.from_symbol('TB')


@pytest.mark.parametrize(
    ('size', 'expected'),
    [
        (0, '0 B'),
        (1, '1 B'),
        (500, '500 B'),
        (999, '999 B'),
        (1000, '1.0 kB'),
        (1024, '1.0 kB'),
        (1050, '1.1 kB'),
        (9_960, '10.0 kB'),
        (10_000, '10 kB'),
        (12_500, '13 kB'),
        (999_999, '1000 kB'),
        (1_500_000, '1.5 MB'),
        (123_456_789, '123 MB'),
        (9_999_900_000, '10.0 GB'),
        (10_000_000_000, '10 GB'),
        (5 * 10**12, '5000 GB'),
    ],
)
def test_format_auto(fmt: FileSizeFormat, size: int, expected: str):
    assert fmt.format(size) == expected


def test_format_cutoff_before_rounding(fmt: FileSizeFormat):
    # 9.9999 -> small pattern, 10.0 -> large pattern
    assert fmt.format(9_999_900, ScaleUnit.MEGABYTE) == '10.0 MB'
    assert fmt.format(10_000_000, ScaleUnit.MEGABYTE) == '10 MB'


@pytest.mark.parametrize(
    ('size', 'expected'),
    [
        (0, '0'),
        (40, '0'),
        (49, '0'),
        (50, '0.1'),
        (500, '0.5'),
        (999, '1.0'),
    ],
)
def test_format_lower_cutoff(fmt: FileSizeFormat, size: int, expected: str):
    assert fmt.format(size, ScaleUnit.KILOBYTE, symbol=False) == expected


def test_format_byte_unit_ignores_magnitude(fmt: FileSizeFormat):
    assert fmt.format(1234, ScaleUnit.BYTE) == '1234 B'
    assert fmt.format(10**7, ScaleUnit.BYTE, symbol=False) == '10000000'


def test_format_explicit_unit(fmt: FileSizeFormat):
    assert fmt.format(1024, ScaleUnit.MEGABYTE) == '0 MB'
    assert fmt.format(2_500_000, ScaleUnit.KILOBYTE) == '2500 kB'


def test_format_negative(fmt: FileSizeFormat):
    with pytest.raises(InvalidArgumentError, match='File size cannot be negative'):
        fmt.format(-5)


@pytest.mark.parametrize(
    ('progressed', 'total', 'expected'),
    [
        (500, 1000, '0.5/1.0 kB'),
        (1000, 1000, '1.0 kB'),
        (100, -1, '100 B'),
        (0, 0, '0 B'),
        (0, 2_000_000, '0/2.0 MB'),
        (1_500_000, 20_000_000, '1.5/20 MB'),
        (120, 999, '120/999 B'),
        (2_000_000, -1, '2.0 MB'),
    ],
)
def test_format_progress(
    fmt: FileSizeFormat, progressed: int, total: int, expected: str
):
    assert fmt.format_progress(progressed, total) == expected


def test_format_progress_negative(fmt: FileSizeFormat):
    with pytest.raises(InvalidArgumentError, match='Progressed file size cannot be'):
        fmt.format_progress(-1, 10)


def test_format_progress_overrun(fmt: FileSizeFormat):
    with pytest.raises(InvalidArgumentError, match='bigger than size: 11 > 10'):
        fmt.format_progress(11, 10)


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


@pytest.mark.parametrize('locale', ['de', 'de_DE', 'fr'])
def test_comma_decimal_locale(locale: str):
    fmt = FileSizeFormat(locale)

    assert fmt.format(1024) == '1,0 kB'
    assert fmt.format(12_345) == '12 kB'
    assert fmt.format_progress(500, 1000) == '0,5/1,0 kB'


def test_unit_symbol_not_localized():
    assert FileSizeFormat('de').format(2_000_000_000).endswith(' GB')


def test_format_is_pure(fmt: FileSizeFormat):
    first = [fmt.format(x) for x in (0, 1024, 9_960, 10**9)]
    fmt.format_progress(1, 2)
    second = [FileSizeFormat('en').format(x) for x in (0, 1024, 9_960, 10**9)]

    assert first == second

from .config import ReportConfig
from .size_format import FileSizeFormat, InvalidArgumentError, ScaleUnit, select_unit
from .transfer import (
    ConsoleTransferListener,
    LoggingTransferListener,
    QuietTransferListener,
    RequestType,
    TransferEvent,
    TransferListener,
    TransferResource,
    create_listener,
    replay_transfer,
)

__version__ = '0.1.0'
__all__ = [
    'ConsoleTransferListener',
    'FileSizeFormat',
    'InvalidArgumentError',
    'LoggingTransferListener',
    'QuietTransferListener',
    'ReportConfig',
    'RequestType',
    'ScaleUnit',
    'TransferEvent',
    'TransferListener',
    'TransferResource',
    'create_listener',
    'replay_transfer',
    'select_unit',
]

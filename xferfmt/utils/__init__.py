from .console import TransferProgress, TransferSizeColumn, cnsl, set_logger

__all__ = ['TransferProgress', 'TransferSizeColumn', 'cnsl', 'set_logger']

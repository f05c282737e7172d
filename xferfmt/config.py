import dataclasses as dc
from typing import Literal, get_args

from babel import Locale

Mode = Literal['console', 'log', 'quiet']


@dc.dataclass
class ReportConfig:
    locale: str = 'en'
    mode: Mode = 'console'
    show_progress: bool = True

    def __post_init__(self):
        if self.mode not in (modes := get_args(Mode)):
            msg = f'{self.mode!r} not in {modes}'
            raise ValueError(msg)

        # 잘못된 locale이면 babel.UnknownLocaleError / ValueError
        self.locale = str(Locale.parse(self.locale))

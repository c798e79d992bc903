"""轮询策略配置。"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_MAX_RETRIES = 10


@dataclass
class PollPolicy:
    """GetChatResult 的重试策略。

    Attributes:
        interval: 每次失败后等待的秒数。
        max_retries: 首次调用之外最多再试几次；总调用次数为 max_retries + 1。
    """

    interval: float = DEFAULT_POLL_INTERVAL
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        if self.interval < 0:
            self.interval = 0.0
        if self.max_retries < 0:
            self.max_retries = 0

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    @classmethod
    def from_settings(cls, settings) -> PollPolicy:
        return cls(
            interval=getattr(settings, "poll_interval", DEFAULT_POLL_INTERVAL),
            max_retries=getattr(settings, "poll_max_retries", DEFAULT_MAX_RETRIES),
        )

"""问答任务：轮询策略、任务引擎与文本提取。"""

from .chat_task import ChatTaskEngine
from .config import PollPolicy
from .extractor import extract_text

__all__ = ["ChatTaskEngine", "PollPolicy", "extract_text"]

"""对外 API 服务模块。

提供简化的函数接口供 CLI 或其他上层应用调用。引擎需要显式构造并传入，
测试时可以注入假的客户端。
"""

from typing import Optional

from bilichat.config.settings import settings as default_settings
from bilichat.domain.exceptions import BusinessError
from bilichat.infrastructure.logging.logger import logger
from bilichat.providers import create_client
from bilichat.providers.base import SearchChatClient
from bilichat.tasks import ChatTaskEngine, PollPolicy


def build_engine(settings=None, client: Optional[SearchChatClient] = None) -> ChatTaskEngine:
    """按配置构造 ChatTaskEngine。

    Args:
        settings: 配置对象，默认使用全局 settings。
        client: 已构造好的客户端；为空时新建 gRPC channel 与客户端。
    """
    settings = settings or default_settings
    if client is None:
        client = create_client(settings)
    return ChatTaskEngine(client, policy=PollPolicy.from_settings(settings))


def search_chat(query: str, engine: ChatTaskEngine) -> str:
    """提问并返回回答文本。

    Raises:
        各种 domain.exceptions 中定义的异常
    """
    try:
        return engine.run(query)
    except BusinessError as e:
        logger.warning(f"Chat failed: {e}", extra={"extra": {
            "error_type": type(e).__name__,
            "code": e.code,
            "error": e.message,
        }})
        raise

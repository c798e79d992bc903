"""搜索问答客户端抽象接口。

上层 ChatTaskEngine 不直接依赖 grpc，而是依赖此协议：

- 真实实现为 BiliSearchClient（grpc_client.py）。
- 测试中用一个返回固定结果的假客户端替换即可。
"""

from typing import Protocol

from bilichat.domain.models import ChatResult, SessionId


class SearchChatClient(Protocol):
    """搜索问答客户端协议。

    实现者需要提供：
    - submit_chat_task(query): 提交问题，返回会话 ID。
    - get_chat_result(query, session_id): 获取回答；回答未生成完毕时抛出异常。

    两个方法失败时都抛出 BusinessError 的子类（TransportError / ServiceError）。
    """

    def submit_chat_task(self, query: str) -> SessionId:
        ...

    def get_chat_result(self, query: str, session_id: SessionId) -> ChatResult:
        ...

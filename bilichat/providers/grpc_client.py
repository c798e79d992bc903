"""B站搜索问答 gRPC 客户端。

本模块负责：

1. 建立到 grpc.biliapi.net 的 TLS 长连接（带 keepalive）。
2. 通过 SearchStub 发送 SubmitChatTaskReq / GetChatResultReq，并附带 x-bili-* 请求头。
3. 捕获 grpc.RpcError，转换为 TransportError / ServiceError。
4. 将 protobuf 的 ChatResult 转换为 domain.models.ChatResult。
"""

from typing import List, Optional

import grpc

from bilichat.domain.models import Bubble, ChatResult, Paragraph, SessionId, TextNode, TextRun
from bilichat.infrastructure.logging.logger import logger
from bilichat.protocol import (
    GET_CHAT_RESULT_METHOD,
    SUBMIT_CHAT_TASK_METHOD,
    GetChatResultReq,
    SearchStub,
    SubmitChatTaskReq,
)
from bilichat.providers.errors import translate_rpc_error
from bilichat.providers.metadata import DeviceIdentity, build_headers


def channel_options(settings) -> List[tuple]:
    """keepalive 相关的 channel 参数（毫秒）。"""

    return [
        ("grpc.keepalive_time_ms", int(settings.keepalive_time * 1000)),
        ("grpc.keepalive_timeout_ms", int(settings.keepalive_timeout * 1000)),
        ("grpc.keepalive_permit_without_calls", 1 if settings.keepalive_permit_without_calls else 0),
    ]


def open_channel(settings, target: Optional[str] = None) -> grpc.Channel:
    """打开进程级共享的 TLS channel。

    grpc 的 channel 是惰性连接的，这里不会阻塞等待握手；
    连接失败会在第一次调用时以 UNAVAILABLE 的形式暴露出来。
    """

    target = target or settings.grpc_target
    channel = grpc.secure_channel(
        target,
        grpc.ssl_channel_credentials(),
        options=channel_options(settings),
    )
    logger.info("BiliGRPC channel opened", extra={"extra": {"target": target}})
    return channel


class BiliSearchClient:
    """SearchChatClient 的 gRPC 实现。

    channel 由调用方创建并持有，本类只读使用，不负责关闭。
    """

    def __init__(self, channel: grpc.Channel, settings):
        self._settings = settings
        # access_key 与设备信息在进程内不变，请求头构造一次即可
        self._headers = build_headers(settings.access_key, DeviceIdentity.from_settings(settings))
        self._timeout = getattr(settings, "rpc_timeout", None)
        self._stub = SearchStub(channel)

    @property
    def headers(self):
        return self._headers

    def submit_chat_task(self, query: str) -> SessionId:
        """提交问题，返回会话 ID。"""

        req = SubmitChatTaskReq(query=query)
        try:
            resp = self._stub.SubmitChatTask(req, metadata=self._headers.as_metadata(), timeout=self._timeout)
        except grpc.RpcError as e:
            raise translate_rpc_error(e, method=SUBMIT_CHAT_TASK_METHOD) from e
        logger.debug("submit_chat_task.ok", extra={"extra": {"session_id": resp.session_id}})
        return resp.session_id

    def get_chat_result(self, query: str, session_id: SessionId) -> ChatResult:
        """获取回答；服务端尚未生成完毕时同样以错误返回。"""

        req = GetChatResultReq(query=query, session_id=session_id)
        try:
            resp = self._stub.GetChatResult(req, metadata=self._headers.as_metadata(), timeout=self._timeout)
        except grpc.RpcError as e:
            raise translate_rpc_error(e, method=GET_CHAT_RESULT_METHOD, quiet=True) from e
        return to_chat_result(resp)


def to_chat_result(pb) -> ChatResult:
    """将 bilibili.broadcast.message.main.ChatResult 转换为统一的 ChatResult。"""

    bubbles: List[Bubble] = []
    for bubble_pb in pb.bubble:
        paragraphs: List[Paragraph] = []
        for para_pb in bubble_pb.paragraphs:
            text = None
            if para_pb.HasField("text"):
                text = TextRun(nodes=[TextNode(raw_text=n.raw_text) for n in para_pb.text.nodes])
            paragraphs.append(Paragraph(text=text))
        bubbles.append(Bubble(paragraphs=paragraphs))
    return ChatResult(session_id=pb.session_id, bubbles=bubbles, code=pb.code)

"""B站 gRPC 协议层。

bilibili/ 下是 .proto 定义及其生成代码（见 scripts/gen_protos.sh），
这里只对外暴露本项目用到的消息类与服务 stub。
"""

from bilichat.protocol.bilibili.app.search.v2.search_pb2 import (
    GetChatResultReq,
    SubmitChatTaskReq,
    SubmitChatTaskRsp,
)
from bilichat.protocol.bilibili.app.search.v2.search_pb2_grpc import (
    SearchServicer,
    SearchStub,
    add_SearchServicer_to_server,
)
from bilichat.protocol.bilibili.broadcast.message.main.search_pb2 import ChatResult as ChatResultPb
from bilichat.protocol.bilibili.metadata.device.device_pb2 import Device
from bilichat.protocol.bilibili.metadata.locale.locale_pb2 import Locale
from bilichat.protocol.bilibili.metadata.metadata_pb2 import Metadata
from bilichat.protocol.bilibili.metadata.network.network_pb2 import WIFI as NETWORK_TYPE_WIFI
from bilichat.protocol.bilibili.metadata.network.network_pb2 import Network
from bilichat.protocol.bilibili.rpc.status_pb2 import Status as RpcStatus

SEARCH_SERVICE = "bilibili.app.search.v2.Search"
SUBMIT_CHAT_TASK_METHOD = f"/{SEARCH_SERVICE}/SubmitChatTask"
GET_CHAT_RESULT_METHOD = f"/{SEARCH_SERVICE}/GetChatResult"

__all__ = [
    "Device",
    "Locale",
    "Network",
    "Metadata",
    "RpcStatus",
    "SubmitChatTaskReq",
    "SubmitChatTaskRsp",
    "GetChatResultReq",
    "ChatResultPb",
    "SearchStub",
    "SearchServicer",
    "add_SearchServicer_to_server",
    "NETWORK_TYPE_WIFI",
    "SEARCH_SERVICE",
    "SUBMIT_CHAT_TASK_METHOD",
    "GET_CHAT_RESULT_METHOD",
]

"""服务端集成层。

该包下的模块负责：
- 定义客户端抽象接口 (base)。
- 构造 x-bili-* 请求头 (metadata)。
- 转换 gRPC 错误 (errors)。
- 提供 gRPC 的具体实现 (grpc_client)。
"""

from typing import Optional

import grpc

from bilichat.config.settings import settings as default_settings
from bilichat.providers.base import SearchChatClient
from bilichat.providers.grpc_client import BiliSearchClient, open_channel


def create_client(settings=None, channel: Optional[grpc.Channel] = None) -> SearchChatClient:
    """创建 gRPC 客户端；未传入 channel 时按配置新建一个。"""

    settings = settings or default_settings
    if channel is None:
        channel = open_channel(settings)
    return BiliSearchClient(channel, settings)

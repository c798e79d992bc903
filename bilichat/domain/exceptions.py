"""统一业务异常模型。

所有跨模块抛出的业务级错误都继承自 BusinessError，
CLI 层只需捕获这一个基类即可统一提示并继续下一轮提问。
"""

from typing import Union


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 错误码。传输层错误为 gRPC 状态名（如 "UNAVAILABLE"），
            B站业务错误为服务端返回的整数码（如 -101）。
        message: 用户可读错误信息。
        extra: 其他补充字段（例如 session_id、attempts 等）。
    """

    def __init__(self, code: Union[int, str], message: str, **extra):
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


class TransportError(BusinessError):
    """网络/RPC 层错误：连接失败、TLS 失败、服务端非业务错误等。"""


class ServiceError(BusinessError):
    """B站接口自己的错误码，例如鉴权失败。

    通过 grpc-status-details-bin 中的 bilibili.rpc.Status 下发，
    code/message 分别保留。
    """

    def __init__(self, code: int, message: str, **extra):
        super().__init__(code, message, **extra)

    def __str__(self) -> str:
        return f"{self.code} {self.message}"


class AnswerTimeoutError(BusinessError):
    """轮询超过重试上限仍未拿到结果。"""

    def __init__(self, message: str = "回答超时", **extra):
        super().__init__("ANSWER_TIMEOUT", message, **extra)


class EmptyAnswerError(BusinessError):
    """结果中 bubble 数不足，视为没有回答。"""

    def __init__(self, message: str = "没有回答", **extra):
        super().__init__("EMPTY_ANSWER", message, **extra)

"""gRPC 错误转换。

B站的业务错误（例如鉴权失败）以 UNKNOWN 状态返回，真正的错误码放在
grpc-status-details-bin 里的 bilibili.rpc.Status 中；其余情况都按传输错误处理。
"""

import logging
from typing import Optional

import grpc
from google.protobuf.message import DecodeError
from google.rpc import status_pb2

from bilichat.domain.exceptions import BusinessError, ServiceError, TransportError
from bilichat.infrastructure.logging.logger import logger
from bilichat.protocol import RpcStatus

STATUS_DETAILS_KEY = "grpc-status-details-bin"


def _status_code(err: grpc.RpcError) -> Optional[grpc.StatusCode]:
    code = getattr(err, "code", None)
    return code() if callable(code) else None


def _rich_status(err: grpc.RpcError) -> Optional[status_pb2.Status]:
    trailing = getattr(err, "trailing_metadata", None)
    if not callable(trailing):
        return None
    for key, value in trailing() or ():
        if key == STATUS_DETAILS_KEY:
            try:
                return status_pb2.Status.FromString(value)
            except DecodeError:
                return None
    return None


def _bili_status(err: grpc.RpcError):
    """取出第一个 detail 中的 bilibili.rpc.Status，没有则返回 None。

    不校验外层 code/message 与 detail 是否一致，B站返回的 message
    经常和 grpc-message 不同。
    """

    status = _rich_status(err)
    if status is None or not status.details:
        return None
    detail = status.details[0]
    if not detail.Is(RpcStatus.DESCRIPTOR):
        return None
    bili = RpcStatus()
    detail.Unpack(bili)
    return bili


def translate_rpc_error(err: grpc.RpcError, *, method: str = "", quiet: bool = False) -> BusinessError:
    """把 grpc.RpcError 转换为 ServiceError 或 TransportError，并记录日志。

    quiet=True 时只记 DEBUG 日志，轮询阶段的失败由引擎统一记录。
    """

    level = logging.DEBUG if quiet else logging.WARNING
    code = _status_code(err)
    if code == grpc.StatusCode.UNKNOWN:
        bili = _bili_status(err)
        if bili is not None:
            logger.log(
                level,
                f"BiliGRPC {bili.code} {bili.message}",
                extra={"extra": {"method": method, "code": bili.code, "message": bili.message}},
            )
            return ServiceError(code=bili.code, message=bili.message, method=method)

    code_name = code.name if code is not None else "UNKNOWN"
    logger.log(
        level,
        f"BiliGRPC error: {err}",
        extra={"extra": {"method": method, "status": code_name}},
    )
    details = getattr(err, "details", None)
    message = (details() if callable(details) else None) or str(err)
    return TransportError(code=code_name, message=message, method=method)

"""提交-轮询-提取 的问答任务引擎。

服务端的回答是异步生成的：SubmitChatTask 只返回 session_id，之后需要
反复调用 GetChatResult，直到它不再报错为止。服务端没有 "处理中" 状态，
未完成时直接返回错误，所以这里不区分 "还没好" 和 "真的失败"，
一律按固定间隔重试，超过次数上限后放弃。
"""

from __future__ import annotations

import time
from typing import Callable, Literal, Optional

from bilichat.domain.exceptions import AnswerTimeoutError, BusinessError, EmptyAnswerError
from bilichat.domain.models import ChatResult, SessionId
from bilichat.infrastructure.logging.logger import logger
from bilichat.providers.base import SearchChatClient

from .config import PollPolicy
from .extractor import extract_text


TaskState = Literal["idle", "submitted", "polling", "succeeded", "timed_out", "failed"]


class ChatTaskEngine:
    """把一次异步问答包装成同步调用。

    一次只处理一个问题，不是线程安全的；client 可在多次调用间复用。
    """

    def __init__(
        self,
        client: SearchChatClient,
        policy: Optional[PollPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._client = client
        self._policy = policy or PollPolicy()
        self._sleep = sleep
        self.state: TaskState = "idle"

    @property
    def policy(self) -> PollPolicy:
        return self._policy

    def submit(self, query: str) -> SessionId:
        """提交问题，失败时 TransportError / ServiceError 原样抛出。"""

        self.state = "idle"
        try:
            session_id = self._client.submit_chat_task(query)
        except Exception:
            self.state = "failed"
            raise
        self.state = "submitted"
        return session_id

    def poll(self, query: str, session_id: SessionId) -> ChatResult:
        """反复获取结果，直到一次调用成功或超过重试上限。

        返回的结果不检查是否完整，由调用方处理。
        """

        self.state = "polling"
        retry = 0
        while True:
            try:
                result = self._client.get_chat_result(query, session_id)
            except BusinessError as e:
                if retry >= self._policy.max_retries:
                    self.state = "timed_out"
                    logger.warning(
                        "回答超时",
                        extra={"extra": {"session_id": session_id, "attempts": retry + 1}},
                    )
                    raise AnswerTimeoutError(session_id=session_id, attempts=retry + 1) from e
                logger.info(
                    "waiting ...",
                    extra={"extra": {"session_id": session_id, "retry": retry, "error": str(e)}},
                )
                self._sleep(self._policy.interval)
                retry += 1
                continue
            except Exception:
                self.state = "failed"
                raise
            self.state = "succeeded"
            logger.info(
                "chat_result.ok",
                extra={
                    "extra": {
                        "session_id": session_id,
                        "code": result.code,
                        "bubbles": len(result.bubbles),
                        "attempts": retry + 1,
                    }
                },
            )
            return result

    def run(self, query: str) -> str:
        """提交、轮询并提取回答文本。"""

        session_id = self.submit(query)
        result = self.poll(query, session_id)
        try:
            return extract_text(result)
        except EmptyAnswerError:
            self.state = "failed"
            logger.warning("no bubble", extra={"extra": {"session_id": session_id}})
            raise
        except Exception:
            self.state = "failed"
            raise

"""
交互式命令行入口。

每轮读取一行问题，调用 ChatTaskEngine，打印回答或失败原因后继续下一轮。
任何单次提问的失败都不会让进程退出；EOF（Ctrl-D）或 Ctrl-C 结束循环。
"""

import sys
from typing import Callable

from bilichat.api.service import build_engine, search_chat
from bilichat.config.settings import settings
from bilichat.domain.exceptions import BusinessError
from bilichat.infrastructure.logging.logger import logger
from bilichat.providers import create_client
from bilichat.tasks import ChatTaskEngine

PROMPT = "请输入问题："
ANSWER_PREFIX = "bilibiliSearchAI回答："
ERROR_PREFIX = "回答出错："
SEPARATOR = "--------------------"


def run_repl(
    engine: ChatTaskEngine,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """读取-提问-打印 循环，直到输入结束。"""

    while True:
        try:
            ask = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write("")
            return

        try:
            result = search_chat(ask, engine)
        except BusinessError as e:
            write(f"{ERROR_PREFIX}{e}")
            write(SEPARATOR)
            continue
        except KeyboardInterrupt:
            write("")
            return
        except Exception as e:  # noqa: BLE001 - 单次提问失败不应结束会话
            logger.exception("unexpected error", extra={"extra": {"query": ask}})
            write(f"{ERROR_PREFIX}{e}")
            write(SEPARATOR)
            continue

        write(f"{ANSWER_PREFIX}{result}")
        write(SEPARATOR)


def main() -> int:
    # channel 在进程内只打开一次，所有提问复用
    client = create_client(settings)
    run_repl(build_engine(settings, client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())

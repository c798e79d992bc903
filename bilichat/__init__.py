"""bilichat 顶层包。

B站搜索 AI 问答的命令行客户端：通过 gRPC 提交问题、轮询异步回答，
并把 bubble/paragraph/node 结构的回答拼接为纯文本。
"""

from bilichat.tasks import ChatTaskEngine, PollPolicy, extract_text

__all__ = ["ChatTaskEngine", "PollPolicy", "extract_text"]

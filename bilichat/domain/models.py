"""统一的结果与请求头数据模型。

gRPC 返回的 protobuf 消息在 providers 层被转换成这里的 dataclass，
上层（轮询引擎、文本提取、CLI）只依赖这些模型，不直接接触 protobuf：

- ChatResult -> Bubble -> Paragraph -> TextRun -> TextNode 的回答树。
- HeaderSet: 每次调用都要附带的身份/鉴权元数据。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


# SubmitChatTask 返回的会话标识，仅在一次轮询过程中有效
SessionId = str

HeaderValue = Union[str, bytes]


@dataclass
class TextNode:
    """最小的文本单元，raw_text 原样拼接，不做任何处理。"""

    raw_text: str


@dataclass
class TextRun:
    """段落里的一段文本，由若干节点按顺序组成。"""

    nodes: List[TextNode] = field(default_factory=list)


@dataclass
class Paragraph:
    """bubble 的子单元；非文本段落（卡片、图片等）text 为 None。"""

    text: Optional[TextRun] = None


@dataclass
class Bubble:
    """一个顶层回答区块，目前只消费第一个。"""

    paragraphs: List[Paragraph] = field(default_factory=list)


@dataclass
class ChatResult:
    """GetChatResult 的统一结果。

    - session_id: 服务端回显的会话 ID（可能为空）。
    - bubbles: 回答区块列表；少于 2 个时认为没有可用回答。
    - code: 服务端在结果体里给出的状态码，仅用于日志。
    """

    session_id: str = ""
    bubbles: List[Bubble] = field(default_factory=list)
    code: int = 0


@dataclass(frozen=True)
class HeaderSet:
    """一次查询使用的请求头，构造后不可变。

    key 必须为小写；以 "-bin" 结尾的 key 对应 protobuf 序列化后的 bytes。
    """

    pairs: Tuple[Tuple[str, HeaderValue], ...]

    def as_metadata(self) -> Tuple[Tuple[str, HeaderValue], ...]:
        """返回 grpc 调用可直接使用的 metadata。"""

        return self.pairs

    def get(self, key: str) -> Optional[HeaderValue]:
        for k, v in self.pairs:
            if k == key:
                return v
        return None

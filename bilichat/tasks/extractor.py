"""回答文本提取。"""

from bilichat.domain.exceptions import EmptyAnswerError
from bilichat.domain.models import ChatResult

# 服务端正常回答时至少带两个 bubble，只读取第一个
MIN_BUBBLES = 2


def extract_text(result: ChatResult) -> str:
    """把第一个 bubble 里所有文本节点按顺序拼成一个字符串。

    没有文本的段落直接跳过；全部为空时返回空串而不是报错。
    bubble 少于 MIN_BUBBLES 个时抛出 EmptyAnswerError。
    """

    if len(result.bubbles) < MIN_BUBBLES:
        raise EmptyAnswerError(bubbles=len(result.bubbles))

    parts = []
    for paragraph in result.bubbles[0].paragraphs:
        if paragraph.text is None:
            continue
        for node in paragraph.text.nodes:
            parts.append(node.raw_text)
    return "".join(parts)

"""领域层模型与异常。

包含：
- models: ChatResult 回答树与 HeaderSet 请求头模型。
- exceptions: 业务异常类型定义。
"""

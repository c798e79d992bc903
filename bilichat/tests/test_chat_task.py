import logging

import pytest

from bilichat.domain.exceptions import AnswerTimeoutError, EmptyAnswerError, ServiceError, TransportError
from bilichat.domain.models import Bubble, ChatResult, Paragraph, TextNode, TextRun
from bilichat.tasks import ChatTaskEngine, PollPolicy


def _answer(*texts):
    para = Paragraph(text=TextRun(nodes=[TextNode(raw_text=t) for t in texts]))
    return ChatResult(session_id="s1", bubbles=[Bubble(paragraphs=[para]), Bubble()])


class FakeClient:
    """按顺序返回预设结果；元素是异常时抛出。"""

    def __init__(self, session_id="s1", results=(), submit_error=None):
        self.session_id = session_id
        self.results = list(results)
        self.submit_error = submit_error
        self.submitted = []
        self.polled = []

    def submit_chat_task(self, query):
        self.submitted.append(query)
        if self.submit_error:
            raise self.submit_error
        return self.session_id

    def get_chat_result(self, query, session_id):
        self.polled.append((query, session_id))
        item = self.results.pop(0) if self.results else TransportError(code="UNKNOWN", message="not ready")
        if isinstance(item, Exception):
            raise item
        return item


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


def test_run_single_successful_poll():
    client = FakeClient(results=[_answer("A", "B")])
    sleep = FakeSleep()
    engine = ChatTaskEngine(client, sleep=sleep)
    assert engine.run("q") == "AB"
    assert client.polled == [("q", "s1")]
    assert sleep.calls == []
    assert engine.state == "succeeded"


def test_run_hello_scenario_retries_once():
    not_ready = TransportError(code="UNKNOWN", message="not ready")
    result = ChatResult(
        bubbles=[
            Bubble(paragraphs=[Paragraph(text=TextRun(nodes=[TextNode("Hi"), TextNode(" there")]))]),
            Bubble(),
        ]
    )
    client = FakeClient(session_id="s1", results=[not_ready, result])
    sleep = FakeSleep()
    engine = ChatTaskEngine(client, sleep=sleep)
    assert engine.run("hello") == "Hi there"
    assert client.submitted == ["hello"]
    assert client.polled == [("hello", "s1"), ("hello", "s1")]
    assert sleep.calls == [1.0]


def test_poll_times_out_after_eleven_attempts():
    client = FakeClient(results=[])
    sleep = FakeSleep()
    engine = ChatTaskEngine(client, sleep=sleep)
    with pytest.raises(AnswerTimeoutError) as exc_info:
        engine.poll("q", "s1")
    assert len(client.polled) == 11 == engine.policy.max_attempts
    assert len(sleep.calls) == 10
    assert sleep.total >= 10.0
    assert exc_info.value.message == "回答超时"
    assert exc_info.value.extra["attempts"] == 11
    assert engine.state == "timed_out"


def test_poll_retry_counter_resets_per_call():
    failures = [TransportError(code="UNKNOWN", message="not ready")] * 10
    client = FakeClient(results=failures + [_answer("one")] + failures + [_answer("two")])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    assert engine.run("q1") == "one"
    assert engine.run("q2") == "two"
    assert len(client.polled) == 22


def test_poll_treats_service_errors_as_pending():
    client = FakeClient(results=[ServiceError(code=-404, message="x"), _answer("ok")])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    assert engine.run("q") == "ok"


def test_poll_returns_incomplete_result_without_checking():
    client = FakeClient(results=[ChatResult(bubbles=[])])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    result = engine.poll("q", "s1")
    assert result.bubbles == []


def test_run_empty_answer():
    client = FakeClient(results=[ChatResult(bubbles=[Bubble()])])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    with pytest.raises(EmptyAnswerError):
        engine.run("q")
    assert engine.state == "failed"


def test_run_submit_service_error_propagates_unwrapped():
    err = ServiceError(code=403, message="auth invalid")
    client = FakeClient(submit_error=err)
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    with pytest.raises(ServiceError) as exc_info:
        engine.run("q")
    assert exc_info.value is err
    assert (exc_info.value.code, exc_info.value.message) == (403, "auth invalid")
    assert client.polled == []
    assert engine.state == "failed"


def test_custom_policy_is_used():
    client = FakeClient(results=[])
    sleep = FakeSleep()
    engine = ChatTaskEngine(client, policy=PollPolicy(interval=0.25, max_retries=2), sleep=sleep)
    with pytest.raises(AnswerTimeoutError):
        engine.poll("q", "s1")
    assert len(client.polled) == 3
    assert sleep.calls == [0.25, 0.25]


def test_poll_policy_clamps_negative_values():
    policy = PollPolicy(interval=-1, max_retries=-5)
    assert policy.interval == 0.0
    assert policy.max_retries == 0
    assert policy.max_attempts == 1


def test_poll_policy_from_settings():
    class SettingsStub:
        poll_interval = 0.5
        poll_max_retries = 3

    policy = PollPolicy.from_settings(SettingsStub())
    assert (policy.interval, policy.max_retries) == (0.5, 3)


def test_unexpected_poll_error_marks_failed_and_is_not_retried():
    client = FakeClient(results=[RuntimeError("bad payload")])
    sleep = FakeSleep()
    engine = ChatTaskEngine(client, sleep=sleep)
    with pytest.raises(RuntimeError):
        engine.run("q")
    assert engine.state == "failed"
    assert len(client.polled) == 1
    assert sleep.calls == []


def test_unexpected_submit_error_marks_failed():
    client = FakeClient(submit_error=ValueError("boom"))
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    with pytest.raises(ValueError):
        engine.run("q")
    assert engine.state == "failed"


def test_unexpected_extract_error_marks_failed():
    # 段落里的 text 不是 TextRun，提取时出错
    broken = ChatResult(bubbles=[Bubble(paragraphs=[Paragraph(text=object())]), Bubble()])
    engine = ChatTaskEngine(FakeClient(results=[broken]), sleep=FakeSleep())
    with pytest.raises(AttributeError):
        engine.run("q")
    assert engine.state == "failed"


def test_poll_logs_result_code(caplog):
    result = _answer("ok")
    result.code = 7
    client = FakeClient(results=[TransportError(code="UNKNOWN", message="not ready"), result])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    with caplog.at_level(logging.INFO, logger="bilichat"):
        engine.poll("q", "s1")
    ok = [r for r in caplog.records if r.getMessage() == "chat_result.ok"]
    assert len(ok) == 1
    assert ok[0].extra == {"session_id": "s1", "code": 7, "bubbles": 2, "attempts": 2}


def test_poll_retry_logged_at_info(caplog):
    client = FakeClient(results=[TransportError(code="UNKNOWN", message="not ready"), _answer("ok")])
    engine = ChatTaskEngine(client, sleep=FakeSleep())
    with caplog.at_level(logging.INFO, logger="bilichat"):
        engine.poll("q", "s1")
    waiting = [r for r in caplog.records if r.getMessage() == "waiting ..."]
    assert len(waiting) == 1
    assert waiting[0].levelno == logging.INFO
    assert waiting[0].extra["retry"] == 0

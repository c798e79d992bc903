from bilichat.api.service import build_engine, search_chat
from bilichat.cli.main import ANSWER_PREFIX, ERROR_PREFIX, PROMPT, SEPARATOR, run_repl
from bilichat.domain.exceptions import ServiceError
from bilichat.domain.models import Bubble, ChatResult, Paragraph, TextNode, TextRun
from bilichat.tasks import ChatTaskEngine


class ScriptedClient:
    """第一个问题鉴权失败，之后正常回答。"""

    def __init__(self):
        self.queries = []

    def submit_chat_task(self, query):
        self.queries.append(query)
        if len(self.queries) == 1:
            raise ServiceError(code=403, message="auth invalid")
        return "s1"

    def get_chat_result(self, query, session_id):
        para = Paragraph(text=TextRun(nodes=[TextNode(raw_text="echo:"), TextNode(raw_text=query)]))
        return ChatResult(session_id=session_id, bubbles=[Bubble(paragraphs=[para]), Bubble()])


class ExplodingClient:
    def submit_chat_task(self, query):
        raise RuntimeError("boom")

    def get_chat_result(self, query, session_id):
        raise AssertionError("not reached")


def _inputs(*lines):
    it = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read, prompts


def test_repl_keeps_looping_after_service_error():
    engine = ChatTaskEngine(ScriptedClient(), sleep=lambda s: None)
    read, prompts = _inputs("first", "second question")
    out = []
    run_repl(engine, read=read, write=out.append)

    assert prompts == [PROMPT, PROMPT, PROMPT]
    assert out[:2] == [f"{ERROR_PREFIX}403 auth invalid", SEPARATOR]
    assert out[2:4] == [f"{ANSWER_PREFIX}echo:second question", SEPARATOR]


def test_repl_survives_unexpected_errors():
    engine = ChatTaskEngine(ExplodingClient(), sleep=lambda s: None)
    read, _ = _inputs("q")
    out = []
    run_repl(engine, read=read, write=out.append)
    assert out[:2] == [f"{ERROR_PREFIX}boom", SEPARATOR]


def test_repl_stops_on_keyboard_interrupt():
    def read(prompt):
        raise KeyboardInterrupt

    out = []
    run_repl(ChatTaskEngine(ScriptedClient()), read=read, write=out.append)
    assert out == [""]


def test_build_engine_uses_settings_policy():
    class SettingsStub:
        poll_interval = 0.1
        poll_max_retries = 2

    client = ScriptedClient()
    engine = build_engine(SettingsStub(), client=client)
    assert engine.policy.interval == 0.1
    assert engine.policy.max_retries == 2


def test_search_chat_returns_answer():
    client = ScriptedClient()
    client.queries.append("warm-up")
    engine = build_engine(client=client)
    assert search_chat("hi", engine) == "echo:hi"

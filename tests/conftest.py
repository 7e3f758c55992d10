import pytest
import os


@pytest.fixture(scope='session', autouse=True)
def setup_test_env():
    """Keep tests off the real provider."""
    os.environ.setdefault('OPENAI_API_KEY', 'test-key')
    yield


class ScriptedCompleter:
    """Fake LLM collaborator: returns queued responses in order and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, system_prompt, user_prompt):
        self.calls.append((system_prompt, user_prompt))
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    # AIService-compatible surface for the Flask app
    def complete(self, system_prompt, user_prompt):
        return self(system_prompt, user_prompt)


def make_cards(n, start=1):
    return "\n####\n".join(
        f"Question: Q{i}\nAnswer: A{i}" for i in range(start, start + n)
    )


@pytest.fixture(name="make_cards")
def make_cards_fixture():
    return make_cards


@pytest.fixture
def completer_factory():
    return ScriptedCompleter


@pytest.fixture
def events():
    recorded = []

    def sink(event, **fields):
        recorded.append((event, fields))

    sink.recorded = recorded
    return sink

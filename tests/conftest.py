# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - sample_text / sample_rows  → a three-employee file
# - employee_file              → that file written under tmp_path
# - store                      → RecordStore loaded from sample_rows
# - gateway                    → PersistenceGateway on employee_file
# - ScriptedInput              → input provider replaying answers
# ==============================================

import pytest

from roster import config
from roster.codec import decode
from roster.persistence import PersistenceGateway
from roster.store import RecordStore


SAMPLE_TEXT = (
    "1,Ann,Lee,ann@example.com,20.00\n"
    "2,Bo,Ng,bo@example.com,15.50\n"
    "3,Carla,Diaz,carla@example.com,32.75\n"
)


class ScriptedInput:
    """Replays answers in order; raises EOFError once they run out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_rows(sample_text):
    return decode(sample_text)


@pytest.fixture
def employee_file(tmp_path, sample_text):
    path = tmp_path / "employees.csv"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def store(sample_rows) -> RecordStore:
    s = RecordStore()
    s.load(sample_rows)
    return s


@pytest.fixture
def gateway(employee_file) -> PersistenceGateway:
    return PersistenceGateway(employee_file)


@pytest.fixture
def fresh_config(monkeypatch):
    """Drop the cached config and keep a local .env out of the way."""
    monkeypatch.setattr(config, "_config_instance", None)
    monkeypatch.setattr(config, "load_dotenv", lambda **kwargs: False)
    for name in (
        "ROSTER_DATA_FILE",
        "ROSTER_ATOMIC_SAVE",
        "ROSTER_PROMPT_ATTEMPTS",
        "ROSTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    config._config_instance = None


@pytest.fixture
def scripted_input():
    return ScriptedInput

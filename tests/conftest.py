"""
Shared fixtures: scripted transport, recording sleeper and logger.
"""

import pytest

from fetch_retry import RetryConfig, RetryingFetcher


class FakeResponse:
    def __init__(self, status_code: int):
        self.status_code = status_code


class ScriptedTransport:
    """Replays a list of outcomes: status codes, responses or exceptions."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def execute(self, url, options=None):
        self.calls.append((url, options))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, int):
            return FakeResponse(outcome)
        return outcome


class RecordingSleeper:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


class RecordingLogger:
    def __init__(self):
        self.records = []

    def warning(self, event, **kw):
        self.records.append(("warning", event, kw))

    def error(self, event, **kw):
        self.records.append(("error", event, kw))

    def events(self, level):
        return [kw for lvl, _, kw in self.records if lvl == level]


@pytest.fixture
def sleeper():
    return RecordingSleeper()


@pytest.fixture
def log():
    return RecordingLogger()


@pytest.fixture
def make_fetcher(sleeper, log):
    def factory(outcomes, config=None, policy=None):
        transport = ScriptedTransport(outcomes)
        fetcher = RetryingFetcher(
            transport=transport,
            config=config or RetryConfig(),
            policy=policy,
            sleep=sleeper,
            logger=log,
        )
        return fetcher, transport
    return factory

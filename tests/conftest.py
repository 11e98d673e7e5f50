# Area: Tests
"""Shared fixtures."""

import logging

import pytest

from rps_referee._shared import logging_config


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() detaches the package logger from root; undo after each test."""
    yield
    pkg_logger = logging.getLogger("rps_referee")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    logging_config.disable_interactive_mode()


class ScriptedIO:
    """Feeds canned answers to a prompt loop and records everything written."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.lines = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        answer = self._answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def write(self, text):
        self.lines.append(text)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def scripted_io():
    return ScriptedIO

"""
Pytest configuration and shared fixtures.
"""

import json

import pytest
from typer.testing import CliRunner

from pkgrename.core.decision import DecisionGate
from pkgrename.core.session import RenameSession


class ScriptedPrompt:
    """Prompt stand-in answering from a fixed list and recording questions."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()


@pytest.fixture
def scripted_prompt():
    """Factory for prompts answering with the given answers in order."""
    return ScriptedPrompt


@pytest.fixture
def project_dir(tmp_path):
    """A small project whose package name is 'foo'."""
    root = tmp_path / "my-app"
    root.mkdir()
    (root / "package.json").write_text(json.dumps({
        "name": "foo",
        "version": "1.0.0",
        "description": "Old description",
    }, indent=2))
    (root / "foo.txt").write_text("hello foo")
    (root / "readme.md").write_text("nothing to see")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "foo.txt").write_text("foo")
    return root


@pytest.fixture
def make_session(tmp_path):
    """Factory for sessions rooted at ``tmp_path`` with a scripted gate."""
    def _make(old_name="foo", new_name="bar", answers=(), root=None, **kwargs):
        session = RenameSession.create(old_name, new_name, root or tmp_path, **kwargs)
        prompt = ScriptedPrompt(answers)
        return session, DecisionGate(session, prompt=prompt), prompt
    return _make

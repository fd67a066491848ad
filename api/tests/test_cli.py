"""
Tests for the verse-explorer command-line client.
"""

import json

import pytest

from verse_explorer import cli
from verse_explorer.core.errors import TransportFailure
from verse_explorer.models.chat import ChatChoice, ChatMessage, ChatResponse

CONTENT = (
    '```json\n{"verse_reference": "Psalm 23:1", "verse_text": "The Lord is my shepherd", '
    '"context": "A psalm of David.", "exegesis": "", "themes": "Provision", '
    '"cross_references": []}\n```'
)


class FakeChatClient:
    error = None

    def __init__(self, settings):
        self.closed = False

    async def complete(self, request):
        if self.error is not None:
            raise self.error
        return ChatResponse(choices=[ChatChoice(message=ChatMessage(role="assistant", content=CONTENT))])

    async def aclose(self):
        self.closed = True


@pytest.fixture(autouse=True)
def patched(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")
    monkeypatch.setattr(cli, "ChatCompletionClient", FakeChatClient)
    monkeypatch.setattr(cli, "setup_telemetry", lambda console_export: None)
    FakeChatClient.error = None


@pytest.mark.asyncio
async def test_prints_all_tabs(capsys):
    exit_code = await cli.run("Psalm 23:1")
    out = capsys.readouterr().out

    assert exit_code == 0
    assert out.startswith("# Psalm 23:1")
    assert '"The Lord is my shepherd"' in out
    assert "## Historical & Literary Context" in out
    assert "No exegesis provided." in out
    assert "No cross-references were provided for this verse." in out


@pytest.mark.asyncio
async def test_single_tab(capsys):
    await cli.run("Psalm 23:1", tab="themes")
    out = capsys.readouterr().out

    assert "## Theological Themes" in out
    assert "Provision" in out
    assert "## Historical & Literary Context" not in out


@pytest.mark.asyncio
async def test_json_output(capsys):
    await cli.run("Psalm 23:1", as_json=True)
    body = json.loads(capsys.readouterr().out)

    assert body["status"] == "success"
    assert body["analysis"]["verse_reference"] == "Psalm 23:1"


@pytest.mark.asyncio
async def test_error_exit_code(capsys):
    FakeChatClient.error = TransportFailure("connection refused")

    exit_code = await cli.run("Psalm 23:1")
    out = capsys.readouterr().out

    assert exit_code == 1
    assert out.startswith("An Error Occurred")
    assert "connection refused" in out


@pytest.mark.asyncio
async def test_missing_key(monkeypatch, capsys):
    monkeypatch.setenv("GROQ_API_KEY", "")

    exit_code = await cli.run("Psalm 23:1")

    assert exit_code == 1
    assert "API Key not found." in capsys.readouterr().out


def test_blank_verse_exits_with_usage_error(monkeypatch):
    monkeypatch.setattr("sys.argv", ["verse-explorer", "   "])
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 2

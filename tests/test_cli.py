"""
Tests for the suggest_names command-line entry point.

The Gemini generator is swapped for an in-process fake, so product-title
mode runs without Google Cloud credentials.

Usage:
    python -m pytest tests/test_cli.py
"""

import io

import pytest

import suggest_names
from suggestion import BaseGenerator, GenerationError

RESPONSE = "Great choice!\n**Playful**:\n* Sprout Squad\n**Remember:** have fun"


class FakeGemini(BaseGenerator):
    """Accepts the GeminiGenerator arguments; fails for 'Cactus'."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def generate(self, prompt: str) -> str:
        if "Cactus" in prompt:
            raise GenerationError("quota exceeded")
        return RESPONSE


@pytest.fixture
def fake_gemini(monkeypatch):
    monkeypatch.setattr("suggestion.pipeline.GeminiGenerator", FakeGemini)


# ------------------------------------------------------------------
# Offline mode
# ------------------------------------------------------------------


def test_from_file_prints_lists(tmp_path, capsys):
    response = tmp_path / "response.txt"
    response.write_text(
        "Here you go:\n**Names**:\n* Moss Boss\n**Remember:** be bold\n",
        encoding="utf-8",
    )

    suggest_names.main(["--from-file", str(response), "-v", "0"])

    assert capsys.readouterr().out == "**Names**:\n* Moss Boss\n"


def test_from_file_stop_at_terminator(tmp_path, capsys):
    response = tmp_path / "response.txt"
    response.write_text("* A\n**Note:** x\n* B", encoding="utf-8")

    suggest_names.main(["--from-file", str(response), "--stop-at-terminator", "-v", "0"])

    assert capsys.readouterr().out == "* A\n"


def test_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Sure:\n* A\n  * B\nThanks!\n"))

    suggest_names.main(["--from-file", "-", "-v", "0"])

    assert capsys.readouterr().out == "* A\n  * B\n"


def test_empty_extraction_exits_nonzero(tmp_path):
    response = tmp_path / "response.txt"
    response.write_text("No lists here.", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["--from-file", str(response), "-v", "0"])
    assert exc_info.value.code == 1


def test_requires_products_or_file():
    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["-v", "0"])
    assert exc_info.value.code == 2


def test_missing_file_is_an_argument_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["--from-file", str(tmp_path / "nope.txt"), "-v", "0"])
    assert exc_info.value.code == 2


def test_directory_is_an_argument_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["--from-file", str(tmp_path), "-v", "0"])
    assert exc_info.value.code == 2


def test_undecodable_file_is_an_argument_error(tmp_path, capsys):
    response = tmp_path / "response.txt"
    response.write_bytes(b"* caf\xe9\n* ok")

    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["--from-file", str(response), "-v", "0"])
    assert exc_info.value.code == 2
    assert "Could not read" in capsys.readouterr().err


# ------------------------------------------------------------------
# Product-title mode
# ------------------------------------------------------------------


def test_single_product_prints_plain_list(fake_gemini, capsys):
    suggest_names.main(["Fern", "-v", "0"])

    assert capsys.readouterr().out == "**Playful**:\n* Sprout Squad\n"


def test_many_products_print_one_block_each(fake_gemini, capsys):
    suggest_names.main(["Fern", "Moss", "-v", "0"])

    assert capsys.readouterr().out == (
        "## Fern\n**Playful**:\n* Sprout Squad\n\n"
        "## Moss\n**Playful**:\n* Sprout Squad\n\n"
    )


def test_partial_batch_failure_still_succeeds(fake_gemini, capsys):
    suggest_names.main(["Fern", "Cactus", "-v", "0"])

    out = capsys.readouterr().out
    assert out == "## Fern\n**Playful**:\n* Sprout Squad\n\n## Cactus\n\n"


def test_all_products_failing_exits_nonzero(fake_gemini):
    with pytest.raises(SystemExit) as exc_info:
        suggest_names.main(["Cactus", "-v", "0"])
    assert exc_info.value.code == 1

"""
Command-line tests using click's CliRunner.
"""

import pytest
from click.testing import CliRunner

from tweet_secret.cli import cli

WORDS = ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog"]
CORPUS = "Hello there. Nice day! Who knows? Meet me at the usual place tonight."


@pytest.fixture
def files(tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text(CORPUS, encoding="utf-8")
    dictionary = tmp_path / "words.txt"
    dictionary.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    config = tmp_path / "config.properties"
    config.write_text(
        f"tweet-size=140\nexcess-marker=|\ndictionary-files={dictionary}\n",
        encoding="utf-8",
    )
    return {"corpus": str(corpus), "config": str(config)}


def _result_lines(output):
    """Output lines that are results rather than log records."""
    return [line for line in output.splitlines() if line and not line.startswith("[")]


def _invoke(*args):
    return CliRunner().invoke(cli, list(args))


def test_encode_then_decode(files):
    encoded = _invoke("-c", files["corpus"], "--config", files["config"], "the", "lazy", "dog")
    assert encoded.exit_code == 0, encoded.output
    tweets = [line for line in _result_lines(encoded.output) if "|" in line]
    assert len(tweets) == 3

    decode_args = ["-c", files["corpus"], "--config", files["config"]]
    for tweet in tweets:
        decode_args += ["-d", tweet]
    decoded = _invoke(*decode_args)
    assert decoded.exit_code == 0, decoded.output
    assert _result_lines(decoded.output)[-3:] == ["the", "lazy", "dog"]


def test_unknown_word_warns(files):
    result = _invoke("-c", files["corpus"], "--config", files["config"], "the", "zebra")
    assert result.exit_code == 0
    assert '\t[WARNING]: "zebra" could not be processed' in result.output


def test_decode_without_marker_warns(files):
    result = _invoke("-c", files["corpus"], "--config", files["config"], "-d", "Hello there.")
    assert result.exit_code == 0
    assert '[WARNING]: "Hello there." could not be processed' in result.output


def test_marker_override(files):
    result = _invoke("-c", files["corpus"], "--config", files["config"], "-m", "~", "fox")
    assert result.exit_code == 0
    assert "Hello th~ere." in result.output


def test_help():
    result = _invoke("--help")
    assert result.exit_code == 0
    assert "--corpus" in result.output
    assert "--decode" in result.output
    assert _invoke("-h").exit_code == 0


def test_corpus_is_required(files):
    result = _invoke("--config", files["config"], "the")
    assert result.exit_code == 2
    assert "--corpus" in result.output


def test_invalid_tweet_size(files):
    result = _invoke("-c", files["corpus"], "--config", files["config"], "-s", "1", "the")
    assert result.exit_code == 1
    assert "tweet-size" in result.output


def test_corpus_too_small(tmp_path, files):
    tiny = tmp_path / "tiny.txt"
    tiny.write_text("Hi.", encoding="utf-8")
    result = _invoke("-c", str(tiny), "--config", files["config"], "the")
    assert result.exit_code == 1
    assert "not large enough" in result.output

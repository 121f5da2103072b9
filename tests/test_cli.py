"""Tests for the command line front end."""

import pytest

from wtfdict import cli, engine
from wtfdict.errors import HTTPStatusError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WTF_BASE_URL", "WTF_USER_AGENT", "WTF_ENGINE", "WTF_LANG", "WTF_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_fetch(monkeypatch):
    urls = []

    def install(html=None, error=None):
        def fetch(url, config=None):
            urls.append(url)
            if error is not None:
                raise error
            return html

        monkeypatch.setattr(engine, "fetch_document", fetch)
        return urls

    return install


def test_lookup_prints_report(fake_fetch, pronounce_html, capsys):
    urls = fake_fetch(pronounce_html)
    assert cli.main(["hello"]) == 0
    out = capsys.readouterr().out
    assert urls == ["http://www.youdao.com/w/hello"]
    assert "hə'ləʊ[misc]" in out
    assert "int. 喂；哈罗" in out
    assert out.rstrip("\n").endswith("http://www.youdao.com/w/hello\n-----------------------")


def test_lookup_with_language_and_web_flag(fake_fetch, eng_html, capsys):
    urls = fake_fetch(eng_html)
    assert cli.main(["-l", "eng", "-w", "hello", "world"]) == 0
    out = capsys.readouterr().out
    assert urls == ["http://www.youdao.com/w/eng/hello%20world"]
    assert "v.       greet; salute" in out


def test_google_engine_prints_empty_report(fake_fetch, capsys):
    urls = fake_fetch("<html></html>")
    assert cli.main(["-e", "google", "hello"]) == 0
    assert urls == []
    assert capsys.readouterr().out == "-----------------------\n\n-----------------------\n\n"


def test_fatal_error_reports_and_exits_nonzero(fake_fetch, capsys):
    fake_fetch(error=HTTPStatusError("http://www.youdao.com/w/hello", 503, "Service Unavailable"))
    assert cli.main(["hello"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: status code: 503" in captured.err


@pytest.mark.parametrize("argv", [[], ["-l", "klingon", "hello"], ["-e", "bing", "hello"]])
def test_bad_arguments_exit_quietly(fake_fetch, argv, capsys):
    urls = fake_fetch("<html></html>")
    assert cli.main(argv) == 0
    assert urls == []
    assert capsys.readouterr().out == ""


def test_blank_words_exit_quietly(fake_fetch, capsys):
    urls = fake_fetch("<html></html>")
    assert cli.main(["  "]) == 0
    assert urls == []
    assert capsys.readouterr().out == ""


def test_default_language_from_environment(fake_fetch, monkeypatch):
    monkeypatch.setenv("WTF_LANG", "jap")
    urls = fake_fetch("<html></html>")
    assert cli.main(["猫"]) == 0
    assert urls == ["http://www.youdao.com/w/jap/猫"]


def test_unknown_engine_from_env_falls_back_to_youdao(fake_fetch, pronounce_html, monkeypatch, capsys):
    monkeypatch.setenv("WTF_ENGINE", "bing")
    urls = fake_fetch(pronounce_html)
    assert cli.main(["hello"]) == 0
    assert urls == ["http://www.youdao.com/w/hello"]
    assert "int. 喂；哈罗" in capsys.readouterr().out

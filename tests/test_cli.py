"""Smoke tests de la CLI (Typer) con transporte simulado."""

from __future__ import annotations

import json
import sys

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.tavily_client import TavilyClient
from cli import doctor
from core.config import AppSettings

runner = CliRunner()


@pytest.fixture
def patched(monkeypatch, make_transport):
    """Sustituye settings y cliente; devuelve una función para fijar la respuesta."""

    def _install(status_code=200, payload=None, api_key="tvly-env-key"):
        recorder = make_transport(status_code, payload)
        settings = AppSettings(_env_file=None, api_key=api_key)
        monkeypatch.setattr(cli_main, "_load_settings", lambda: settings)
        monkeypatch.setattr(
            cli_main,
            "_build_client",
            lambda s: TavilyClient(s, transport=recorder.transport),
        )
        return recorder

    return _install


def test_search_json_sends_only_given_options(patched):
    recorder = patched(payload={"query": "x", "results": []})

    result = runner.invoke(cli_main.app, ["search", "x", "--max-results", "5", "--json", "--api-key", "k"])

    assert result.exit_code == 0, result.output
    assert recorder.body() == {"query": "x", "max_results": 5, "api_key": "k"}
    assert json.loads(result.stdout) == {"query": "x", "results": []}


def test_search_uses_settings_key(patched):
    recorder = patched(payload={"results": []})

    result = runner.invoke(cli_main.app, ["search", "x", "--include-domain", "python.org", "--json"])

    assert result.exit_code == 0, result.output
    assert recorder.body() == {"query": "x", "include_domains": ["python.org"], "api_key": "tvly-env-key"}


def test_search_table_output(patched):
    patched(payload={"query": "x", "answer": "Yes", "results": [{"title": "T", "url": "https://u", "score": 0.5}]})

    result = runner.invoke(cli_main.app, ["search", "x"])

    assert result.exit_code == 0, result.output
    assert "Answer" in result.output
    assert "https://u" in result.output


def test_map_text_output(patched):
    patched(payload={"base_url": "https://e.com", "results": ["https://e.com/a"]})

    result = runner.invoke(cli_main.app, ["map", "https://e.com", "--limit", "3"])

    assert result.exit_code == 0, result.output
    assert "Site Map Results:" in result.output
    assert "[1] URL: https://e.com/a" in result.output


def test_crawl_writes_output_file(patched, tmp_path):
    recorder = patched(payload={"base_url": "https://e.com", "results": []})
    out = tmp_path / "nested" / "crawl.json"

    result = runner.invoke(
        cli_main.app,
        ["crawl", "https://e.com", "--max-depth", "2", "--category", "Blog", "-o", str(out)],
    )

    assert result.exit_code == 0, result.output
    assert recorder.body() == {
        "url": "https://e.com",
        "max_depth": 2,
        "categories": ["Blog"],
        "api_key": "tvly-env-key",
    }
    assert json.loads(out.read_text(encoding="utf-8")) == {"base_url": "https://e.com", "results": []}


def test_extract_multiple_urls(patched):
    recorder = patched(payload={"results": []})

    result = runner.invoke(cli_main.app, ["extract", "https://a.com", "https://b.com", "--format", "text"])

    assert result.exit_code == 0, result.output
    assert recorder.body() == {
        "urls": ["https://a.com", "https://b.com"],
        "format": "text",
        "api_key": "tvly-env-key",
    }


def test_missing_key_exits_without_request(patched):
    recorder = patched(api_key=None)

    result = runner.invoke(cli_main.app, ["search", "x"])

    assert result.exit_code == 1
    assert "TAVILY_API_KEY is required" in result.output
    assert recorder.requests == []


def test_invalid_key_exit_code(patched):
    patched(status_code=401, payload={"detail": "bad"})

    result = runner.invoke(cli_main.app, ["map", "https://e.com"])

    assert result.exit_code == 1
    assert "Invalid API key" in result.output


def test_search_flag_options(patched):
    recorder = patched(payload={"results": []})

    result = runner.invoke(
        cli_main.app,
        ["search", "x", "--include-image-descriptions", "--include-favicon", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert recorder.body() == {
        "query": "x",
        "include_image_descriptions": True,
        "include_favicon": True,
        "api_key": "tvly-env-key",
    }


def test_extract_include_favicon(patched):
    recorder = patched(payload={"results": []})

    result = runner.invoke(cli_main.app, ["extract", "https://a.com", "--include-favicon", "--json"])

    assert result.exit_code == 0, result.output
    assert recorder.body() == {"urls": ["https://a.com"], "include_favicon": True, "api_key": "tvly-env-key"}


def test_crawl_domain_options(patched):
    recorder = patched(payload={"base_url": "https://e.com", "results": []})

    result = runner.invoke(
        cli_main.app,
        [
            "crawl",
            "https://e.com",
            "--select-domain",
            "^docs\\.e\\.com$",
            "--allow-external",
            "--include-favicon",
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    assert recorder.body() == {
        "url": "https://e.com",
        "select_domains": ["^docs\\.e\\.com$"],
        "allow_external": True,
        "include_favicon": True,
        "api_key": "tvly-env-key",
    }


def test_map_no_allow_external(patched):
    recorder = patched(payload={"base_url": "https://e.com", "results": []})

    result = runner.invoke(
        cli_main.app,
        ["map", "https://e.com", "--select-domain", "e.com", "--no-allow-external", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert recorder.body() == {
        "url": "https://e.com",
        "select_domains": ["e.com"],
        "allow_external": False,
        "api_key": "tvly-env-key",
    }


def test_search_table_with_null_results(patched):
    patched(payload={"query": "x", "results": None})

    result = runner.invoke(cli_main.app, ["search", "x"])

    assert result.exit_code == 0, result.output
    assert "Results: x" in result.output


def test_search_non_object_body(patched):
    patched(payload=["https://odd.example"])

    result = runner.invoke(cli_main.app, ["search", "x"])

    assert result.exit_code == 0, result.output
    assert "https://odd.example" in result.output


def test_tools_json():
    result = runner.invoke(cli_main.app, ["tools", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [t["name"] for t in data] == ["tavily-search", "tavily-extract", "tavily-crawl", "tavily-map"]
    assert data[2]["inputSchema"]["required"] == ["url"]


def test_tools_table():
    result = runner.invoke(cli_main.app, ["tools"])

    assert result.exit_code == 0, result.output
    assert "tavily-crawl" in result.output


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG only")
def test_doctor_setup_key(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(cli_main.app, ["doctor", "setup-key"], input="tvly-new\n")

    assert result.exit_code == 0, result.output
    env_file = tmp_path / "tavily-mcp" / ".env"
    assert "TAVILY_API_KEY=tvly-new" in env_file.read_text(encoding="utf-8").splitlines()


def test_doctor_run_reports_missing_key(monkeypatch):
    monkeypatch.delenv("TAVILY_API_KEY", raising=False)
    monkeypatch.setattr(doctor, "AppSettings", lambda: AppSettings(_env_file=None, api_key=None))

    async def fake_check(url, settings):
        return True, "HTTP 200"

    monkeypatch.setattr(doctor, "_check_http", fake_check)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "MISSING" in result.output
    assert "https://api.tavily.com/crawl" in result.output

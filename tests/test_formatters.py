from __future__ import annotations

import json

import pytest

from adapters.formatters import (
    format_crawl_results,
    format_map_results,
    format_response,
    format_search_results,
)
from core.domain.operations import Operation


def test_search_with_answer_and_images():
    payload = {
        "query": "python",
        "answer": "A language.",
        "results": [
            {
                "title": "Python",
                "url": "https://python.org",
                "content": "Official site",
                "score": 0.9,
                "favicon": "https://python.org/favicon.ico",
            }
        ],
        "images": [
            "https://img.example/1.png",
            {"url": "https://img.example/2.png", "description": "A snake"},
        ],
    }

    text = format_search_results(payload)

    assert text.splitlines()[0] == "Answer: A language."
    assert "Detailed Results:" in text
    assert "Title: Python\nURL: https://python.org\nContent: Official site" in text
    assert "Favicon: https://python.org/favicon.ico" in text
    assert "Raw Content:" not in text
    assert "[1] URL: https://img.example/1.png" in text
    assert "[2] URL: https://img.example/2.png\n   Description: A snake" in text


def test_search_without_answer_or_images():
    text = format_search_results({"query": "q", "results": []})

    assert text == "Detailed Results:"


def test_extract_results_without_title():
    payload = {
        "results": [{"url": "https://example.com", "raw_content": "# Heading"}],
        "failed_results": [],
    }

    text = format_response(Operation.EXTRACT, payload)

    assert "URL: https://example.com" in text
    assert "Raw Content: # Heading" in text


def test_crawl_truncates_content_preview():
    long_content = "a" * 250
    payload = {
        "base_url": "https://docs.example.com",
        "results": [
            {"url": "https://docs.example.com/a", "raw_content": long_content},
            {"url": "https://docs.example.com/b", "raw_content": "short"},
        ],
        "response_time": 2.5,
    }

    text = format_crawl_results(payload)

    assert text.startswith("Crawl Results:\nBase URL: https://docs.example.com\n\nCrawled Pages:")
    assert f"Content: {'a' * 200}..." in text
    assert "Content: short" in text
    assert "[2] URL: https://docs.example.com/b" in text


def test_map_lists_urls():
    payload = {
        "base_url": "https://example.com",
        "results": ["https://example.com/", "https://example.com/about"],
    }

    text = format_map_results(payload)

    assert text == (
        "Site Map Results:\n"
        "Base URL: https://example.com\n"
        "\nMapped Pages:\n"
        "\n[1] URL: https://example.com/\n"
        "\n[2] URL: https://example.com/about"
    )
    assert format_response(Operation.MAP, payload) == text


class TestLooseResponseShapes:
    def test_null_results(self):
        assert format_response(Operation.SEARCH, {"results": None}) == "Detailed Results:"

    def test_null_images(self):
        assert format_response(Operation.SEARCH, {"images": None, "results": []}) == "Detailed Results:"

    def test_result_without_url(self):
        text = format_response(Operation.SEARCH, {"results": [{"title": "no url"}]})

        assert "Title: no url" in text

    def test_crawl_and_map_with_null_results(self):
        crawl = format_response(Operation.CRAWL, {"base_url": "https://e.com", "results": None})
        site_map = format_response(Operation.MAP, {"base_url": "https://e.com", "results": None})

        assert crawl == "Crawl Results:\nBase URL: https://e.com\n\nCrawled Pages:"
        assert site_map == "Site Map Results:\nBase URL: https://e.com\n\nMapped Pages:"

    def test_crawl_page_without_url(self):
        text = format_response(Operation.CRAWL, {"results": [{"raw_content": "body"}]})

        assert "Content: body" in text

    @pytest.mark.parametrize("operation", list(Operation))
    def test_non_object_body_is_rendered_as_json(self, operation):
        assert format_response(operation, []) == "[]"
        assert json.loads(format_response(operation, ["https://e.com"])) == ["https://e.com"]

    def test_unexpected_field_type_falls_back_to_json(self):
        payload = {"results": "not-a-list", "answer": "A"}

        text = format_response(Operation.SEARCH, payload)

        assert json.loads(text) == payload

"""Tests for how the ReSpec source URL is built."""

from __future__ import annotations

import httpx

from validator.stages.generate import build_source_url

BASE = "http://localhost:5000/"


def test_relative_src_is_served_locally():
    url = build_source_url("index.html", {}, BASE)
    assert url == "http://localhost:5000/index.html"


def test_nested_relative_src():
    url = build_source_url("drafts/spec.html", {}, BASE)
    assert url == "http://localhost:5000/drafts/spec.html"


def test_params_are_appended():
    url = httpx.URL(
        build_source_url("index.html", {"githubToken": "t", "specStatus": "WD"}, BASE)
    )
    assert url.path == "/index.html"
    assert url.params["githubToken"] == "t"
    assert url.params["specStatus"] == "WD"


def test_params_merge_into_existing_query():
    url = httpx.URL(
        build_source_url("spec.html?specStatus=ED&x=1", {"specStatus": "WD"}, BASE)
    )
    assert url.params.get_list("specStatus") == ["WD"]
    assert url.params["x"] == "1"


def test_absolute_url_is_fetched_directly():
    url = build_source_url("https://w3c.github.io/foo/", {"githubToken": "t"}, BASE)
    assert url.startswith("https://w3c.github.io/foo/")
    assert "githubToken=t" in url
    assert "localhost" not in url

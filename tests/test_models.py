"""Tests for request validation and result models."""

from __future__ import annotations

import pytest

from validator.models import (
    CommandResult,
    ConfigurationError,
    Outcome,
    Stage,
    StageFailedError,
    ValidationRequest,
)


class TestValidationRequest:
    def test_defaults(self):
        request = ValidationRequest()
        assert request.src == "index.html"
        assert not request.skip_links
        assert not request.skip_markup
        assert not request.use_get
        assert request.source_params == {}

    def test_user_without_token_is_rejected(self):
        with pytest.raises(ConfigurationError, match="Missing --gh-token value."):
            ValidationRequest(gh_user="octocat")

    def test_user_with_token_is_accepted(self):
        request = ValidationRequest(gh_token="tok", gh_user="octocat")
        assert request.source_params == {"githubToken": "tok", "githubUser": "octocat"}

    def test_blank_src_is_rejected(self):
        with pytest.raises(ConfigurationError):
            ValidationRequest(src="  ")

    def test_source_params_order(self):
        request = ValidationRequest(status="CR", gh_token="t", gh_user="u")
        assert list(request.source_params) == ["githubToken", "githubUser", "specStatus"]

    def test_request_is_immutable(self):
        request = ValidationRequest()
        with pytest.raises(AttributeError):
            request.src = "other.html"  # type: ignore[misc]


class TestCommandResult:
    def test_output_combines_streams(self):
        result = CommandResult(argv=["tool"], returncode=0, stdout="out\n", stderr="err\n")
        assert result.ok
        assert result.output == "out\nerr\n"

    def test_command_line_is_quoted(self):
        result = CommandResult(argv=["java", "-jar", "my vnu.jar"], returncode=1)
        assert not result.ok
        assert result.command_line == "java -jar 'my vnu.jar'"


class TestStageFailedError:
    def test_message_from_result(self):
        result = CommandResult(argv=["vnu"], returncode=1, stderr="bad markup\n")
        exc = StageFailedError(Stage.MARKUP, result)
        assert str(exc) == "Command failed with exit code 1: vnu"
        assert exc.diagnostics == "bad markup\n"

    def test_diagnostics_fall_back_to_message(self):
        exc = StageFailedError(Stage.LINKS, message="manifest missing")
        assert exc.diagnostics == "manifest missing"


def test_outcome_exit_code():
    assert Outcome(passed=True).exit_code == 0
    assert Outcome(passed=False, failed_stage=Stage.GENERATING).exit_code == 1

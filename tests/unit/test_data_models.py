"""
Unit tests for data models and configuration.
"""

import pytest
from pydantic import ValidationError

from ai_code_reviewer.models.pr_diff import PRContext, DiffFile, DiffChunk, LineChange, DEV_NULL
from ai_code_reviewer.models.review import ReviewFinding, GitHubComment, ReviewOutcome, RunResult
from ai_code_reviewer.models.event import EventPayload
from ai_code_reviewer.config import AppConfig


class TestPRDiffModels:
    """Unit tests for PR diff data models."""

    def test_line_change_line_number(self):
        """Deleted lines use the original-side number, others the new side."""
        assert LineChange(type='add', content='+x', new_line=7).line_number == 7
        assert LineChange(type='del', content='-x', old_line=3).line_number == 3
        assert LineChange(type='normal', content=' x', old_line=3, new_line=8).line_number == 8

    def test_line_change_validation(self):
        with pytest.raises(ValueError):
            LineChange(type='changed', content='x')

    def test_diff_chunk_validation(self):
        """Test DiffChunk validation rules."""
        with pytest.raises(ValueError):
            DiffChunk(content='@@', old_start=-1, old_lines=1, new_start=1, new_lines=1)

        with pytest.raises(ValueError):
            DiffChunk(content='@@', old_start=1, old_lines=-1, new_start=1, new_lines=1)

    def test_diff_chunk_line_sets(self):
        chunk = DiffChunk(
            content='@@ -1,2 +1,3 @@',
            old_start=1,
            old_lines=2,
            new_start=1,
            new_lines=3,
            changes=[
                LineChange(type='normal', content=' a', old_line=1, new_line=1),
                LineChange(type='del', content='-b', old_line=2),
                LineChange(type='add', content='+c', new_line=2),
                LineChange(type='add', content='+d', new_line=3),
            ]
        )

        assert chunk.new_line_numbers == {1, 2, 3}
        assert chunk.additions == 2
        assert chunk.deletions == 1

    def test_diff_file_target(self):
        assert DiffFile(from_path='a.py', to_path='a.py').has_target
        assert not DiffFile(from_path='a.py', to_path=DEV_NULL).has_target
        assert not DiffFile(from_path='a.py', to_path=None).has_target
        assert DiffFile(to_path=None).path == ""
        assert DiffFile(to_path=DEV_NULL).path == DEV_NULL

    def test_pr_context(self):
        pr = PRContext(owner='octo', repo='hello', pull_number=5, title='T')
        assert pr.full_name == 'octo/hello'
        assert pr.description == ''

        with pytest.raises(ValueError):
            PRContext(owner='octo', repo='hello', pull_number=0)


class TestReviewModels:
    """Unit tests for review data models."""

    def test_finding_from_model_json(self):
        """String line numbers are converted to int without range checks."""
        finding = ReviewFinding.model_validate({"lineNumber": "42", "reviewComment": "x"})
        assert finding.line_number == 42
        assert finding.review_comment == "x"

    @pytest.mark.parametrize("raw", [42, "42", " 42 ", 42.0, "42.0"])
    def test_finding_line_number_forms(self, raw):
        finding = ReviewFinding.model_validate({"lineNumber": raw, "reviewComment": "x"})
        assert finding.line_number == 42

    @pytest.mark.parametrize("raw", ["abc", "4.5", None])
    def test_finding_invalid_line_number(self, raw):
        with pytest.raises(ValidationError):
            ReviewFinding.model_validate({"lineNumber": raw, "reviewComment": "x"})

    def test_finding_requires_comment(self):
        with pytest.raises(ValidationError):
            ReviewFinding.model_validate({"lineNumber": 1})

    def test_github_comment_payload(self):
        comment = GitHubComment(path="a.ts", line=42, body="x")
        assert comment.to_payload() == {"path": "a.ts", "line": 42, "body": "x"}

    def test_review_outcome_variants(self):
        finding = ReviewFinding(lineNumber=1, reviewComment="x")

        ok = ReviewOutcome.ok([finding])
        assert ok.succeeded
        assert ok.findings == [finding]
        assert ok.reason is None

        failed = ReviewOutcome.failed("boom")
        assert not failed.succeeded
        assert failed.findings == []
        assert failed.reason == "boom"

    def test_run_result_status_validation(self):
        assert RunResult(status='submitted').submitted
        assert not RunResult(status='skipped').submitted
        with pytest.raises(ValueError):
            RunResult(status='done')


class TestEventPayload:
    """Unit tests for event payload model."""

    def test_synchronize_payload(self):
        event = EventPayload.model_validate({
            "action": "synchronize",
            "number": 12,
            "before": "aaa",
            "after": "bbb",
            "repository": {"name": "hello", "owner": {"login": "octo", "id": 1}},
            "pull_request": {"title": "ignored"},
        })

        assert event.owner == "octo"
        assert event.repo == "hello"
        assert event.number == 12
        assert (event.before, event.after) == ("aaa", "bbb")

    def test_missing_repository(self):
        with pytest.raises(ValidationError):
            EventPayload.model_validate({"action": "opened", "number": 1})

    def test_invalid_number(self):
        with pytest.raises(ValidationError):
            EventPayload.model_validate({
                "action": "opened",
                "number": 0,
                "repository": {"name": "r", "owner": {"login": "o"}},
            })


class TestConfig:
    """Unit tests for configuration loading."""

    def test_from_env_action_inputs(self, monkeypatch):
        monkeypatch.setenv("INPUT_GITHUBTOKEN", "gh-token")
        monkeypatch.setenv("INPUT_OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("INPUT_OPENAI_API_MODEL", "gpt-4o")
        monkeypatch.setenv("INPUT_EXCLUDE", " *.md, dist/** ,,")
        monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")

        config = AppConfig.from_env()

        assert config.github.token == "gh-token"
        assert config.openai.api_key == "sk-test"
        assert config.openai.model == "gpt-4o"
        assert config.review.exclude_patterns == ["*.md", "dist/**"]
        assert config.event_path == "/tmp/event.json"
        config.validate()

    def test_from_env_fallbacks(self, monkeypatch):
        for name in ("INPUT_GITHUBTOKEN", "INPUT_GITHUB_TOKEN", "INPUT_OPENAI_API_KEY",
                     "INPUT_OPENAI_API_MODEL", "OPENAI_API_MODEL", "INPUT_EXCLUDE", "EXCLUDE"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("GITHUB_TOKEN", "fallback")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-fallback")

        config = AppConfig.from_env()

        assert config.github.token == "fallback"
        assert config.openai.api_key == "sk-fallback"
        assert config.openai.model == "gpt-4"
        assert config.review.exclude_patterns == []

    def test_validate_reports_all_errors(self):
        config = AppConfig()
        config.logging.level = "LOUD"

        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "GitHub token is required" in message
        assert "OpenAI API key is required" in message
        assert "Event payload path is required" in message
        assert "Invalid log level" in message

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "github:\n"
            "  token: gh\n"
            "openai:\n"
            "  api_key: sk\n"
            "  model: gpt-4o-mini\n"
            "  max_tokens: 500\n"
            "review:\n"
            "  exclude: '*.lock'\n"
            "  validate_line_numbers: true\n"
            "event_path: /tmp/event.json\n",
            encoding="utf-8",
        )

        config = AppConfig.from_yaml(str(config_file))

        assert config.openai.model == "gpt-4o-mini"
        assert config.openai.max_tokens == 500
        assert config.review.exclude_patterns == ["*.lock"]
        assert config.review.validate_line_numbers is True
        config.validate()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_to_dict_omits_secrets(self):
        config = AppConfig()
        config.github.token = "secret-token"
        config.openai.api_key = "secret-key"

        data = config.to_dict()

        assert "token" not in data["github"]
        assert "api_key" not in data["openai"]
        assert "secret" not in str(data)

"""Unit tests for settings loading from the environment."""

import pytest

from productive_box.config.settings import DEFAULT_END_TAG, DEFAULT_START_TAG, Settings

ENV_VARS = [
    "GH_TOKEN",
    "PRODUCTIVE_GIST_ID",
    "PRODUCTIVE_GIST_FILE",
    "TIMEZONE",
    "MARKDOWN_FILE",
    "PRODUCTIVE_START_TAG",
    "PRODUCTIVE_END_TAG",
    "CONTRIBUTED_REPO_LIMIT",
    "COMMIT_HISTORY_LIMIT",
    "DEBUG",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    """Tests for values when nothing is configured."""

    def test_defaults(self, clean_env):
        s = Settings(_env_file=None)

        assert s.gh_token == ""
        assert s.timezone == ""
        assert s.productive_start_tag == DEFAULT_START_TAG
        assert s.productive_end_tag == DEFAULT_END_TAG
        assert s.contributed_repo_limit == 100
        assert s.commit_history_limit == 100
        assert s.markdown_enabled is False

    def test_missing_required_lists_env_names(self, clean_env):
        assert Settings(_env_file=None).missing_required() == ["PRODUCTIVE_GIST_ID", "GH_TOKEN"]


class TestSettingsFromEnv:
    """Tests for reading the documented env variable names."""

    def test_reads_env_vars(self, clean_env):
        clean_env.setenv("GH_TOKEN", "ghp_abc")
        clean_env.setenv("PRODUCTIVE_GIST_ID", "gist123")
        clean_env.setenv("TIMEZONE", "Asia/Seoul")
        clean_env.setenv("MARKDOWN_FILE", "README.md")
        clean_env.setenv("PRODUCTIVE_START_TAG", "<!-- s -->")
        clean_env.setenv("PRODUCTIVE_END_TAG", "<!-- e -->")
        clean_env.setenv("COMMIT_HISTORY_LIMIT", "50")

        s = Settings(_env_file=None)

        assert s.gh_token == "ghp_abc"
        assert s.productive_gist_id == "gist123"
        assert s.timezone == "Asia/Seoul"
        assert s.markdown_enabled is True
        assert s.productive_start_tag == "<!-- s -->"
        assert s.productive_end_tag == "<!-- e -->"
        assert s.commit_history_limit == 50
        assert s.missing_required() == []

    def test_names_are_case_insensitive(self, clean_env):
        clean_env.setenv("gh_token", "lower")

        assert Settings(_env_file=None).gh_token == "lower"

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PRODUCTIVE_GIST_ID=from-file\nDEBUG=true\n", encoding="utf-8")

        s = Settings(_env_file=env_file)

        assert s.productive_gist_id == "from-file"
        assert s.debug is True

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_tags_use_defaults(self, clean_env, value):
        clean_env.setenv("PRODUCTIVE_START_TAG", value)
        clean_env.setenv("PRODUCTIVE_END_TAG", value)

        s = Settings(_env_file=None)

        assert s.productive_start_tag == DEFAULT_START_TAG
        assert s.productive_end_tag == DEFAULT_END_TAG

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_START_TAG = "<!-- productive-box start -->"
DEFAULT_END_TAG = "<!-- productive-box end -->"

_DEFAULT_TAGS = {
    "productive_start_tag": DEFAULT_START_TAG,
    "productive_end_tag": DEFAULT_END_TAG,
}


class Settings(BaseSettings):
    """Run settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub
    gh_token: str = ""  # Needs `gist` and `repo` scopes for private history
    productive_gist_id: str = ""
    # Name of the file inside the gist to overwrite.
    # Empty string = the gist must contain exactly one file
    productive_gist_file: str = ""

    # IANA timezone name (e.g. "Asia/Seoul").
    # Empty string = the platform's local timezone
    timezone: str = ""

    # Markdown document sink
    # Empty string = document sink disabled (gist only)
    markdown_file: str = ""
    productive_start_tag: str = DEFAULT_START_TAG
    productive_end_tag: str = DEFAULT_END_TAG

    # Query sizes (single page each, GitHub caps both at 100)
    contributed_repo_limit: int = 100
    commit_history_limit: int = 100

    debug: bool = False

    @field_validator("productive_start_tag", "productive_end_tag", mode="before")
    @classmethod
    def _blank_tag_uses_default(cls, value: object, info: ValidationInfo) -> object:
        # An unset Actions input arrives as an empty string
        if value is None or (isinstance(value, str) and not value.strip()):
            return _DEFAULT_TAGS[info.field_name]
        return value

    @property
    def markdown_enabled(self) -> bool:
        """Check if a markdown document is configured."""
        return bool(self.markdown_file)

    def missing_required(self) -> list[str]:
        """Return env var names of required settings that are empty."""
        missing = []
        if not self.productive_gist_id:
            missing.append("PRODUCTIVE_GIST_ID")
        if not self.gh_token:
            missing.append("GH_TOKEN")
        return missing


settings = Settings()

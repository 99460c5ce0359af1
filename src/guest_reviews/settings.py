from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CATEGORIES = {
    "cleanliness": "Cleanliness",
    "communication": "Communication",
    "respect_house_rules": "House rules",
}

_DEFAULT_ISSUE_KEYWORDS = ["dirty", "clean", "noise", "wifi", "internet", "broken", "cold", "hot", "smell"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Hostaway reviews feed
    HOSTAWAY_BASE_URL: str = "https://api.hostaway.com/v1"
    HOSTAWAY_ACCOUNT_ID: str = "61148"
    HOSTAWAY_API_KEY: str = ""
    HOSTAWAY_TIMEOUT_SECONDS: float = 10.0

    # Moderation
    DEFAULT_MODERATOR: str = "manager"

    # Analytics
    REVIEW_CATEGORIES: dict[str, str] = _DEFAULT_CATEGORIES
    ISSUE_KEYWORDS: list[str] = _DEFAULT_ISSUE_KEYWORDS
    LOW_RATING_THRESHOLD: float = 3.0
    TOP_ISSUES_LIMIT: int = 3

    # Boot the in-memory store with the sample catalogue
    SEED_SAMPLE_DATA: bool = True

    @field_validator("HOSTAWAY_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("HOSTAWAY_TIMEOUT_SECONDS must be positive")
        return v

    @field_validator("ISSUE_KEYWORDS")
    @classmethod
    def normalize_keywords(cls, v: list[str]) -> list[str]:
        # Matching is case-insensitive; keep first occurrence order
        seen: list[str] = []
        for keyword in v:
            keyword = keyword.strip().lower()
            if keyword and keyword not in seen:
                seen.append(keyword)
        return seen


settings = Settings()

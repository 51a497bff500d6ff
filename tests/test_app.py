"""Tests for the service surface: health, readiness, chat page and config."""
from taxchat.config import Settings
from taxchat.ui.suggestions import SUGGESTION_PROMPTS, all_suggestions


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready_with_credential(self, client, use_settings):
        use_settings(google_api_key="test-key")

        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"completion_api": "configured"}

    def test_not_ready_without_credential(self, client, use_settings):
        use_settings(google_api_key=None)

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"completion_api": "missing"}


class TestChatPage:
    def test_page_renders_welcome_and_suggestions(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "TaxChatbot" in response.text
        for prompt in ("What is income tax?", "How do I file taxes?"):
            assert prompt in response.text
        assert '"/api/chat"' in response.text


class TestSettings:
    def test_defaults_match_relay_constants(self):
        settings = Settings(_env_file=None, google_api_key=None)

        assert settings.completion_max_tokens == 500
        assert settings.completion_temperature == 0.7
        assert settings.completion_timeout_seconds is None
        assert "tax assistant" in settings.system_prompt
        assert not settings.completion_configured

    def test_allowed_origins_list(self):
        settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test,")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_suggestions_flatten_in_group_order(self):
        flat = all_suggestions()

        assert len(flat) == sum(len(p) for p in SUGGESTION_PROMPTS.values())
        assert flat[:2] == SUGGESTION_PROMPTS["General Tax Questions"]

"""Configuration lookup tests."""

from config import Config


class TestConfigLookup:

    def test_get_reads_environment_at_call_time(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        assert Config.get("GROQ_API_KEY") is None

        monkeypatch.setenv("GROQ_API_KEY", "set-later")
        assert Config.get("GROQ_API_KEY") == "set-later"

    def test_provider_status(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "g")
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        assert Config.provider_status() == {"gemini": True, "groq": False}

    def test_empty_key_counts_as_missing(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        monkeypatch.setenv("GROQ_API_KEY", "")

        assert Config.provider_status() == {"gemini": False, "groq": False}
        assert Config.validate() is False

    def test_validate_passes_with_one_provider(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        monkeypatch.setenv("GROQ_API_KEY", "q")

        assert Config.validate() is True

    def test_handlers_use_provider_key_names(self):
        from inference import GeminiHandler, GroqHandler

        assert GeminiHandler.api_key_env == Config.PROVIDER_KEYS["gemini"] == "GEMINI_API_KEY"
        assert GroqHandler.api_key_env == Config.PROVIDER_KEYS["groq"] == "GROQ_API_KEY"

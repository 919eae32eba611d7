"""Unit tests for the host boundary protocols and their mocks."""

from monument_safezones.protocols import HostPluginProtocol, LangProtocol, PlayerProtocol
from monument_safezones.testing import MockHost, MockLang, MockPlayer


class TestMocksSatisfyProtocols:

    def test_player(self):
        assert isinstance(MockPlayer(), PlayerProtocol)

    def test_host(self):
        assert isinstance(MockHost(), HostPluginProtocol)

    def test_lang(self):
        assert isinstance(MockLang(), LangProtocol)


class TestMockLang:

    def test_falls_back_to_english_then_key(self):
        lang_service = MockLang()
        lang_service.register_messages({"Show.Size": "Size: {0}"}, None)
        lang_service.player_languages["7"] = "fr"
        assert lang_service.get_message("Show.Size", None, "7") == "Size: {0}"
        assert lang_service.get_message("Missing.Key", None, "7") == "Missing.Key"

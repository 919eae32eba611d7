"""
Test helpers for monument_safezones.

Provides mock host, player and lang service for testing.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple


class MockPlayer:
    """Records chat replies and console commands."""

    def __init__(self, user_id: str = "76561198000000000") -> None:
        self._user_id = user_id
        self.replies: List[str] = []
        self.console_commands: List[Tuple[str, Tuple[Any, ...]]] = []

    @property
    def user_id(self) -> str:
        return self._user_id

    def reply(self, message: str) -> None:
        self.replies.append(message)

    def send_console_command(self, command: str, *args: Any) -> None:
        self.console_commands.append((command, args))

    def commands_named(self, command: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.console_commands if name == command]


class MockHost:
    """Minimal Monument Addons stand-in."""

    def __init__(self, name: str = "MonumentAddons", accept: bool = True) -> None:
        self._name = name
        self.accept = accept
        self.registrations: List[Tuple[Any, str, Dict[str, Callable[..., Any]]]] = []

    @property
    def name(self) -> str:
        return self._name

    def api_register_custom_addon(
        self, plugin: Any, addon_name: str, callbacks: Dict[str, Callable[..., Any]]
    ) -> Optional[Any]:
        self.registrations.append((plugin, addon_name, callbacks))
        return True if self.accept else None

    @property
    def callbacks(self) -> Dict[str, Callable[..., Any]]:
        """Callbacks from the latest registration."""
        return self.registrations[-1][2]


class MockLang:
    """In-memory lang service with per-language overrides."""

    def __init__(self) -> None:
        self.messages: Dict[str, Dict[str, str]] = {}
        self.player_languages: Dict[str, str] = {}

    def register_messages(
        self, messages: Dict[str, str], plugin: Any, language: str = "en"
    ) -> None:
        self.messages.setdefault(language, {}).update(messages)

    def get_message(self, key: str, plugin: Any, player_id: Optional[str] = None) -> str:
        language = self.player_languages.get(player_id or "", "en")
        for lang_messages in (self.messages.get(language, {}), self.messages.get("en", {})):
            if key in lang_messages:
                return lang_messages[key]
        return key

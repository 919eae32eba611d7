"""
Protocols for the host boundary.

The host plugin, its players and its lang service are external. These
protocols describe what the addon uses, and back the mocks in `testing`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class PlayerProtocol(Protocol):
    """Protocol for the invoking/viewing player."""

    @property
    def user_id(self) -> str:
        ...

    def reply(self, message: str) -> None:
        """Send a chat message to the player."""
        ...

    def send_console_command(self, command: str, *args: Any) -> None:
        """Run a client console command, e.g. `ddraw.sphere`."""
        ...


@runtime_checkable
class HostPluginProtocol(Protocol):
    """Protocol for the Monument Addons host plugin."""

    @property
    def name(self) -> str:
        ...

    def api_register_custom_addon(
        self, plugin: Any, addon_name: str, callbacks: Dict[str, Callable[..., Any]]
    ) -> Optional[Any]:
        """Register addon callbacks. Returns None on failure."""
        ...


@runtime_checkable
class LangProtocol(Protocol):
    """Protocol for the host's localization service."""

    def register_messages(self, messages: Dict[str, str], plugin: Any) -> None:
        ...

    def get_message(self, key: str, plugin: Any, player_id: Optional[str] = None) -> str:
        ...

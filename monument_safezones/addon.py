"""
Safe zone addon for the Monument Addons host plugin.

Registers the `safezone` addon type with the host and implements its
callbacks. The host calls them in response to player commands:

    /maspawn safezone offset 0,5,0 radius 10
    /maedit safezone size 30,30,30

Argument errors are replied to the player in their language and reported to
the host as `(False, None)`; they never propagate into the host.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from . import lang
from .arguments import parse_args
from .config import SafeZoneConfig
from .constants import ADDON_NAME, EDIT_COMMAND, MIN_EDIT_ARGS, SPAWN_COMMAND
from .ddraw import draw_zone
from .exceptions import ArgumentError, MissingHostError, RegistrationError, UsageError
from .lang import LangEntry
from .log import LogComponent, get_logger
from .protocols import HostPluginProtocol, LangProtocol, PlayerProtocol
from .trigger import SafeZoneComponent
from .types import Quaternion, Vector3, ZoneShape, format_exact
from .zone import create_zone, edit_zone

logger = get_logger(LogComponent.ADDON)

AddonResult = Tuple[bool, Optional[Dict[str, Any]]]


class SafeZonesAddon:
    """
    Addon plugin that allows placing safe zones at monuments.

    Attributes:
        host: The host plugin, None until it is loaded.
        lang: Localization service; English templates are used without one.
        config: Addon settings.
    """

    name = "MonumentAddonsSafeZones"

    def __init__(
        self,
        host: Optional[HostPluginProtocol] = None,
        lang_service: Optional[LangProtocol] = None,
        config: Optional[SafeZoneConfig] = None,
    ) -> None:
        self.host = host
        self.lang = lang_service
        self.config = config or SafeZoneConfig()

    # --- Host hooks ---

    def on_server_initialized(self) -> bool:
        """Register with the host if it is loaded."""
        if self.host is None:
            logger.error(MissingHostError(self.config.host_plugin_name).message)
            return False
        return self.register_custom_addon()

    def on_plugin_loaded(self, plugin: Any) -> bool:
        """Re-register whenever the host plugin (re)loads."""
        if getattr(plugin, "name", None) != self.config.host_plugin_name:
            return False
        self.host = plugin
        return self.register_custom_addon()

    def callbacks(self) -> Dict[str, Callable[..., Any]]:
        return {
            "Initialize": self.initialize,
            "Edit": self.edit,
            "Spawn": self.spawn,
            "Kill": self.kill,
            "Update": self.update,
            "Display": self.display,
        }

    def register_custom_addon(self) -> bool:
        """Register the callbacks. A rejected registration is logged."""
        if self.host is None:
            logger.error(MissingHostError(self.config.host_plugin_name).message)
            return False
        result = self.host.api_register_custom_addon(self, ADDON_NAME, self.callbacks())
        if not result:
            logger.error(RegistrationError(addon_name=ADDON_NAME).message)
            return False
        logger.info(f"Registered '{ADDON_NAME}' addon with {self.host.name}")
        return True

    def load_default_messages(self) -> None:
        if self.lang is not None:
            self.lang.register_messages(lang.default_messages(), self)

    # --- Localization ---

    def get_message(self, player_id: Optional[str], entry: LangEntry, *args: Any) -> str:
        template = entry.english
        if self.lang is not None:
            template = self.lang.get_message(entry.name, self, player_id)
        return entry.format(template, *args)

    def reply_to_player(self, player: PlayerProtocol, entry: LangEntry, *args: Any) -> None:
        player.reply(self.get_message(player.user_id, entry, *args))

    def _reject(self, player: PlayerProtocol, error: ArgumentError) -> AddonResult:
        logger.debug(f"Rejected arguments from {player.user_id}: {error}")
        self.reply_to_player(player, error.lang_entry, *error.lang_args)
        return False, None

    # --- Addon callbacks ---

    def initialize(self, player: PlayerProtocol, args: Sequence[str]) -> AddonResult:
        """`maspawn safezone ...`: build the data for a new zone."""
        try:
            parsed = parse_args(args, SPAWN_COMMAND)
        except ArgumentError as e:
            return self._reject(player, e)

        shape = create_zone(parsed, default_radius=self.config.default_radius)
        return True, shape.to_data()

    def edit(
        self,
        player: PlayerProtocol,
        args: Sequence[str],
        component: Any,
        data: Optional[Dict[str, Any]],
    ) -> AddonResult:
        """`maedit safezone ...`: merge new arguments into existing data."""
        try:
            if len(args) < MIN_EDIT_ARGS:
                raise UsageError(EDIT_COMMAND, ADDON_NAME)
            parsed = parse_args(args, EDIT_COMMAND)
        except ArgumentError as e:
            return self._reject(player, e)

        shape = edit_zone(ZoneShape.from_data(data), parsed)
        return True, shape.to_data()

    def spawn(
        self,
        guid: UUID,
        monument: Any,
        position: Vector3,
        rotation: Quaternion,
        data: Optional[Dict[str, Any]],
    ) -> SafeZoneComponent:
        logger.debug(f"Spawning safe zone {guid}")
        return SafeZoneComponent.create(
            position,
            rotation,
            ZoneShape.from_data(data),
            default_radius=self.config.default_radius,
        )

    def update(self, component: Any, data: Optional[Dict[str, Any]]) -> Any:
        """Called after a successful edit. Returns the same component."""
        if not isinstance(component, SafeZoneComponent):
            return component

        shape = ZoneShape.from_data(data)
        if shape is not None:
            component.update_shape(shape)

        return component

    def kill(self, component: Any) -> None:
        if not isinstance(component, SafeZoneComponent):
            logger.debug(f"Ignoring kill for foreign component {component!r}")
            return
        component.kill()

    def display(
        self,
        component: Any,
        data: Optional[Dict[str, Any]],
        player: PlayerProtocol,
        lines: List[str],
        duration: float,
    ) -> None:
        """Append a summary to `lines` and draw the zone for `player`."""
        shape = ZoneShape.from_data(data)
        if shape is None:
            return

        player_id = player.user_id
        if not shape.offset.is_zero():
            lines.append(self.get_message(player_id, lang.SHOW_OFFSET, shape.offset.format()))

        if shape.is_box:
            lines.append(self.get_message(player_id, lang.SHOW_SIZE, shape.size.format()))
        else:
            lines.append(self.get_message(player_id, lang.SHOW_RADIUS, format_exact(shape.radius)))

        draw_zone(
            player,
            component.transform,
            shape,
            duration,
            color=self.config.draw_color,
            marker_radius=self.config.marker_radius,
            corner_radius=self.config.corner_radius,
        )

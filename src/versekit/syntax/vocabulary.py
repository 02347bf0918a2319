"""Known UEFN types and the namespaces that provide them."""

from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple


DEVICES_NAMESPACE = "/Fortnite.com/Devices"
CHARACTERS_NAMESPACE = "/Fortnite.com/Characters"
GAME_NAMESPACE = "/Fortnite.com/Game"

UEFN_DEVICES: Tuple[str, ...] = (
    "creative_device",
    "button_device",
    "trigger_device",
    "item_spawner_device",
    "player_spawner_device",
    "game_manager_device",
    "item_granter_device",
    "conditional_button_device",
    "elimination_manager_device",
    "team_settings_and_inventory_device",
    "mutator_zone_device",
    "vehicle_spawner_device",
    "creature_spawner_device",
    "creature_manager_device",
    "storm_controller_device",
    "timer_device",
    "tracker_device",
    "hud_message_device",
    "score_manager_device",
    "objective_device",
)

NamespaceTable = Mapping[str, Tuple[str, ...]]


def _build_default_table() -> Dict[str, Tuple[str, ...]]:
    table: Dict[str, Tuple[str, ...]] = {
        device: (DEVICES_NAMESPACE,) for device in UEFN_DEVICES
    }
    table["player"] = (CHARACTERS_NAMESPACE,)
    table["fort_character"] = (CHARACTERS_NAMESPACE,)
    table["game_phase"] = (GAME_NAMESPACE,)
    return table


DEFAULT_NAMESPACES: NamespaceTable = _build_default_table()


def normalize_namespace(path: str) -> str:
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def merge_namespace_tables(
    extra: Mapping[str, Sequence[str]],
    *,
    base: NamespaceTable = DEFAULT_NAMESPACES,
) -> Dict[str, Tuple[str, ...]]:
    """Overlay *extra* on *base*; entries for the same type replace the base entry."""

    merged: Dict[str, Tuple[str, ...]] = dict(base)
    for type_name, paths in extra.items():
        merged[type_name] = tuple(normalize_namespace(path) for path in paths)
    return merged

"""Built-in game content.

Static tables for enemies, items, quests, and victory loot. A JSON content
file (see odyssey.engine.content.load_content) replaces these wholesale.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Enemies
# =============================================================================

ENEMIES: list[dict[str, Any]] = [
    {"name": "Xenobot", "hp": 50, "attack": 10, "defense": 3, "locations": ["terra_prime", "nebula_outpost"]},
    {"name": "Plasmavore", "hp": 40, "attack": 12, "defense": 2, "locations": ["terra_prime", "xylo_delta"]},
    {"name": "Nano Swarm", "hp": 30, "attack": 8, "defense": 1, "locations": ["nebula_outpost"]},
    {"name": "Sand Worm", "hp": 120, "attack": 15, "defense": 5, "locations": ["xylo_delta"]},
    {"name": "Void Stalker", "hp": 80, "attack": 18, "defense": 2, "locations": ["nebula_outpost"]},
]

# =============================================================================
# Items
# =============================================================================

ITEMS: dict[str, dict[str, Any]] = {
    "Energy Cell": {"type": "consumable", "effect": "heal", "value": 30, "description": "Restores 30 HP", "price": 50},
    "Nano Stimpack": {"type": "consumable", "effect": "heal", "value": 50, "description": "Restores 50 HP", "price": 100},
    "Power Cell": {"type": "consumable", "effect": "energy", "value": 40, "description": "Restores 40 Energy", "price": 80},
    "Alien Crystal": {"type": "material", "description": "A mysterious glowing crystal.", "price": 200},
    "Data Chip": {"type": "material", "description": "Contains encrypted data.", "price": 150},
    "Scrap Metal": {"type": "material", "description": "Useful for crafting.", "price": 20},
    "Rusty Pipe": {"type": "material", "description": "An old metal pipe.", "price": 10},
    # Weapons
    "Plasma Rifle": {"type": "weapon", "stats": {"attack": 5}, "description": "A powerful energy weapon.", "price": 500},
    "Laser Blade": {"type": "weapon", "stats": {"attack": 7}, "description": "A high-tech melee weapon.", "price": 750},
    "Photon Cannon": {"type": "weapon", "stats": {"attack": 10}, "description": "Devastating ranged weapon.", "price": 1200},
    # Armor
    "Kevlar Vest": {"type": "armor", "stats": {"defense": 4}, "description": "Basic protective armor.", "price": 400},
    "Titanium Plating": {"type": "armor", "stats": {"defense": 6}, "description": "Heavy-duty armor plating.", "price": 800},
    "Exoskeleton": {"type": "armor", "stats": {"defense": 8}, "description": "Powered armor that enhances strength.", "price": 1500},
    # Accessories
    "Shield Generator": {"type": "accessory", "stats": {"defense": 3}, "description": "Generates a personal forcefield.", "price": 600},
    "Targeting HUD": {"type": "accessory", "stats": {"attack": 3}, "description": "Improves accuracy and damage.", "price": 600},
}

# =============================================================================
# Quests
# =============================================================================

QUESTS: dict[str, dict[str, Any]] = {
    "quest_001": {
        "id": "quest_001",
        "title": "First Contact",
        "description": "Defeat 3 Xenobots to secure the landing zone.",
        "objective": {"type": "kill", "target": "Xenobot", "amount": 3},
        "rewards": {"xp": 50, "items": ["Energy Cell"]},
        "is_main_story": True,
    },
    "quest_002": {
        "id": "quest_002",
        "title": "Scrap Collector",
        "description": "Collect 2 Scrap Metal pieces for repairs.",
        "objective": {"type": "collect", "target": "Scrap Metal", "amount": 2},
        "rewards": {"xp": 30, "items": ["Nano Stimpack"]},
    },
    "quest_003": {
        "id": "quest_003",
        "title": "Alien Threat",
        "description": "Defeat 5 Plasmavores to protect the colony.",
        "objective": {"type": "kill", "target": "Plasmavore", "amount": 5},
        "rewards": {"xp": 75, "items": ["Plasma Rifle"]},
        "is_main_story": True,
    },
    "quest_004": {
        "id": "quest_004",
        "title": "Lost Cargo",
        "description": "Recover a lost Data Chip.",
        "objective": {"type": "collect", "target": "Data Chip", "amount": 1},
        "rewards": {"xp": 45, "items": ["Energy Cell"]},
    },
    "story_01": {
        "id": "story_01",
        "title": "The Awakening",
        "description": "Investigate the strange signal.",
        "rewards": {"xp": 100},
        "is_main_story": True,
        "steps": [
            {
                "type": "kill",
                "target": "Xenobot",
                "amount": 1,
                "rewards": {"xp": 20},
                "dialog": {
                    "title": "Target Eliminated",
                    "text": (
                        "You've defeated the scout. But where did it come from? "
                        "You notice a strange device on its chassis."
                    ),
                },
            },
            {
                "type": "collect",
                "target": "Scrap Metal",
                "amount": 1,
                "rewards": {"items": ["Energy Cell"]},
                "dialog": {
                    "title": "Repairs Needed",
                    "text": "This scrap will help fix the comms array. Maybe we can decode the signal.",
                },
            },
        ],
    },
}

# =============================================================================
# Victory Loot
# =============================================================================

LOOT_TABLE: list[str] = ["Energy Cell", "Alien Crystal", "Data Chip"]


__all__ = ["ENEMIES", "ITEMS", "QUESTS", "LOOT_TABLE"]

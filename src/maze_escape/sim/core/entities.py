"""Entity models for the headless maze crawler.

All data classes use Pydantic v2 BaseModel for validation and
serialization.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

class ItemType(str, Enum):
    """Equipment slot an item belongs to."""

    WEAPON = "weapon"
    ARMOR = "armor"


class Item(BaseModel):
    """A piece of gear.  Immutable once created."""

    model_config = {"frozen": True}

    name: str
    value: int = Field(ge=0)
    """Flat bonus added to attack (weapons) or defense (armor)."""

    item_type: ItemType

    @property
    def stat_label(self) -> str:
        return "ATK" if self.item_type == ItemType.WEAPON else "DEF"

    def describe(self) -> str:
        return f"{self.name} (+{self.value} {self.stat_label})"


class Equipment(BaseModel):
    """The two equipment slots."""

    weapon: Item | None = None
    armor: Item | None = None

    def slot_for(self, item_type: ItemType) -> Item | None:
        if item_type == ItemType.WEAPON:
            return self.weapon
        return self.armor

    def set_slot(self, item_type: ItemType, item: Item | None) -> None:
        if item_type == ItemType.WEAPON:
            self.weapon = item
        else:
            self.armor = item


# ---------------------------------------------------------------------------
# Entity base
# ---------------------------------------------------------------------------

class Entity(BaseModel):
    """Common base for anything with HP."""

    name: str
    max_hp: int = Field(ge=0)
    current_hp: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_hp_bound(self) -> "Entity":
        if self.current_hp > self.max_hp:
            raise ValueError(
                f"current_hp {self.current_hp} exceeds max_hp {self.max_hp}"
            )
        return self

    # -- HP queries ----------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.current_hp <= 0

    # -- damage / heal -------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamping HP at 0.

        Returns the actual HP lost.
        """
        if amount <= 0:
            return 0
        hp_lost = min(self.current_hp, amount)
        self.current_hp -= hp_lost
        return hp_lost

    def heal(self, amount: int) -> int:
        """Heal *amount* HP, capped at ``max_hp``.  Returns HP restored."""
        if amount <= 0:
            return 0
        before = self.current_hp
        self.current_hp = min(self.max_hp, self.current_hp + amount)
        return self.current_hp - before


# ---------------------------------------------------------------------------
# ProgressionState
# ---------------------------------------------------------------------------

class ProgressionState(Entity):
    """The player's durable state, carried across levels and battles.

    A single instance is shared by reference between the exploration level
    and the battle that interrupts it, so damage taken in battle persists
    when the player returns to the maze.
    """

    max_mp: int = Field(ge=0)
    current_mp: int = Field(ge=0)
    base_attack: int = Field(ge=0)
    base_defense: int = Field(ge=0)
    equipment: Equipment = Field(default_factory=Equipment)
    inventory: list[Item] = Field(default_factory=list)
    """Free-floating items, in pickup order."""

    @model_validator(mode="after")
    def _check_mp_bound(self) -> "ProgressionState":
        if self.current_mp > self.max_mp:
            raise ValueError(
                f"current_mp {self.current_mp} exceeds max_mp {self.max_mp}"
            )
        return self

    @property
    def weapon_bonus(self) -> int:
        weapon = self.equipment.weapon
        return weapon.value if weapon is not None else 0

    @property
    def armor_bonus(self) -> int:
        armor = self.equipment.armor
        return armor.value if armor is not None else 0

    @property
    def effective_attack(self) -> int:
        return self.base_attack + self.weapon_bonus

    @property
    def effective_defense(self) -> int:
        return self.base_defense + self.armor_bonus

    def restore(self) -> None:
        """Refill HP and MP to their maximums."""
        self.current_hp = self.max_hp
        self.current_mp = self.max_mp


# ---------------------------------------------------------------------------
# EnemyStats
# ---------------------------------------------------------------------------

class EnemyStats(Entity):
    """A single enemy, built fresh from an archetype for each encounter."""

    archetype: str
    """Identifier of the archetype this instance was spawned from."""

    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    visual_tag: str = "red"
    """Presentation hint (colour name) for whatever draws the enemy."""

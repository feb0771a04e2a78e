"""Tests for Item, ProgressionState and EnemyStats models."""

import pytest
from pydantic import ValidationError

from maze_escape.sim.core.entities import (
    EnemyStats,
    Entity,
    Equipment,
    Item,
    ItemType,
    ProgressionState,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_player(**kwargs) -> ProgressionState:
    defaults = dict(
        name="Hero", max_hp=100, current_hp=100, max_mp=50, current_mp=50,
        base_attack=15, base_defense=7,
    )
    defaults.update(kwargs)
    return ProgressionState(**defaults)


# ---------------------------------------------------------------------------
# Entity -- take_damage
# ---------------------------------------------------------------------------

class TestEntityTakeDamage:
    def test_construction_rejects_hp_above_max(self):
        with pytest.raises(ValidationError):
            Entity(name="Test", max_hp=50, current_hp=60)

    def test_direct_damage(self):
        entity = Entity(name="Test", max_hp=50, current_hp=50)
        hp_lost = entity.take_damage(10)

        assert hp_lost == 10
        assert entity.current_hp == 40

    def test_damage_exceeding_hp_clamps_to_zero(self):
        entity = Entity(name="Test", max_hp=50, current_hp=5)
        hp_lost = entity.take_damage(20)

        assert hp_lost == 5
        assert entity.current_hp == 0
        assert entity.is_dead

    def test_zero_and_negative_damage_are_noops(self):
        entity = Entity(name="Test", max_hp=50, current_hp=50)

        assert entity.take_damage(0) == 0
        assert entity.take_damage(-5) == 0
        assert entity.current_hp == 50


# ---------------------------------------------------------------------------
# Entity -- heal
# ---------------------------------------------------------------------------

class TestEntityHeal:
    def test_heal_caps_at_max_hp(self):
        entity = Entity(name="Test", max_hp=100, current_hp=90)
        restored = entity.heal(30)

        assert entity.current_hp == 100
        assert restored == 10

    def test_heal_partial(self):
        entity = Entity(name="Test", max_hp=100, current_hp=30)
        entity.heal(30)

        assert entity.current_hp == 60

    def test_heal_negative_is_noop(self):
        entity = Entity(name="Test", max_hp=50, current_hp=30)
        entity.heal(-5)

        assert entity.current_hp == 30


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------

class TestItem:
    def test_item_is_immutable(self):
        item = Item(name="Gold Sword", value=25, item_type=ItemType.WEAPON)
        with pytest.raises(ValidationError):
            item.value = 99

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            Item(name="Cursed Sword", value=-1, item_type=ItemType.WEAPON)

    def test_describe(self):
        sword = Item(name="Gold Sword", value=25, item_type="weapon")
        plate = Item(name="Gold Armor", value=15, item_type="armor")

        assert sword.describe() == "Gold Sword (+25 ATK)"
        assert plate.describe() == "Gold Armor (+15 DEF)"


# ---------------------------------------------------------------------------
# ProgressionState
# ---------------------------------------------------------------------------

class TestProgressionState:
    def test_effective_stats_without_equipment(self):
        player = _make_player()

        assert player.effective_attack == 15
        assert player.effective_defense == 7

    def test_effective_stats_with_equipment(self):
        player = _make_player(
            equipment=Equipment(
                weapon=Item(name="Iron Sword", value=12, item_type=ItemType.WEAPON),
                armor=Item(name="Iron Armor", value=7, item_type=ItemType.ARMOR),
            ),
        )

        assert player.effective_attack == 27
        assert player.effective_defense == 14

    def test_restore_refills_hp_and_mp(self):
        player = _make_player(current_hp=12, current_mp=0)
        player.restore()

        assert player.current_hp == 100
        assert player.current_mp == 50

    def test_hp_above_max_rejected(self):
        with pytest.raises(ValidationError):
            _make_player(current_hp=101)

    def test_mp_above_max_rejected(self):
        with pytest.raises(ValidationError):
            _make_player(current_mp=51)

    def test_defaults(self):
        player = _make_player()

        assert player.inventory == []
        assert player.equipment.weapon is None
        assert player.equipment.armor is None


class TestEquipmentSlots:
    def test_slot_for_and_set_slot(self):
        equipment = Equipment()
        sword = Item(name="Bronze Sword", value=8, item_type=ItemType.WEAPON)
        equipment.set_slot(ItemType.WEAPON, sword)

        assert equipment.slot_for(ItemType.WEAPON) is sword
        assert equipment.slot_for(ItemType.ARMOR) is None


# ---------------------------------------------------------------------------
# EnemyStats
# ---------------------------------------------------------------------------

class TestEnemyStats:
    def test_copy_is_independent(self):
        enemy = EnemyStats(
            name="Monster", archetype="monster", max_hp=50, current_hp=50,
            attack=15, defense=5,
        )
        copy = enemy.model_copy(deep=True)
        copy.take_damage(20)

        assert enemy.current_hp == 50
        assert copy.current_hp == 30

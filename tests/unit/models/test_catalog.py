"""Tests for the reference character catalog."""

from __future__ import annotations

from idle_heroes.models import (
    DATA_SPECIALIST_ID,
    SYNERGY_COMBOS,
    CharacterClass,
    GameStrength,
    character_price,
    get_catalog,
    get_definition,
    new_roster,
)


class TestCatalog:
    """Tests for catalog contents."""

    def test_eleven_characters_in_order(self) -> None:
        """Test catalog order is stable."""
        ids = [c.id for c in get_catalog()]
        assert ids == [
            "ryan", "daniel", "josiah", "case", "ian", "ben",
            "rodney", "vinny", "kyle", "christian", "andrew",
        ]

    def test_every_class_and_strength_once(self) -> None:
        """Test each character has a distinct class and strength."""
        catalog = get_catalog()
        assert {c.character_class for c in catalog} == set(CharacterClass)
        assert {c.game_strength for c in catalog} == set(GameStrength)

    def test_level_one_baselines(self) -> None:
        """Test definitions start at level one with three skills and abilities."""
        for character in get_catalog():
            assert character.level == 1
            assert character.experience == 0
            assert len(character.skills) == 3
            assert len(character.abilities) == 3
            assert [a.unlock_level for a in character.abilities] == [1, 3, 5]
            for skill in character.skills:
                assert skill.level == 1
                assert skill.max_level == 10
                assert skill.experience_to_next_level == 100
                assert skill.training_rate > 0

    def test_skill_types_unique_per_character(self) -> None:
        """Test no character has two skills of one type."""
        for character in get_catalog():
            types = [s.type for s in character.skills]
            assert len(types) == len(set(types))

    def test_named_constants_exist(self) -> None:
        """Test special ids reference catalog characters."""
        assert get_definition(DATA_SPECIALIST_ID) is not None
        for first, second in SYNERGY_COMBOS:
            assert get_definition(first) is not None
            assert get_definition(second) is not None

    def test_unknown_definition(self) -> None:
        """Test unknown ids return None."""
        assert get_definition("nobody") is None


class TestNewRoster:
    """Tests for per-game roster copies."""

    def test_copies_are_independent(self) -> None:
        """Test mutating a roster never touches the catalog."""
        roster = new_roster()
        roster["ryan"].level = 5
        roster["ryan"].skills[0].experience = 50

        definition = get_definition("ryan")
        assert definition.level == 1
        assert definition.skills[0].experience == 0

    def test_keyed_in_catalog_order(self) -> None:
        """Test roster keys follow catalog order."""
        assert list(new_roster()) == [c.id for c in get_catalog()]


class TestCharacterPrice:
    """Tests for shop pricing."""

    def test_price_from_stats(self) -> None:
        """Test gold from physical stats and data from mental stats."""
        ryan = get_definition("ryan")
        assert character_price(ryan) == (1100, 800)

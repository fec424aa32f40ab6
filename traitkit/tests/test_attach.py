# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from traitkit import (
	ClassMutator,
	ComposedTraitConflict,
	IncludedTraitConflict,
	MutatorOptions,
	TraitConflict,
	attach,
	trait,
	uses,
)


@trait
class Attacker:
	def attack_points(self) -> int:
		return 10


@trait
class Defender:
	def defense_points(self) -> int:
		return 20


@trait
class Soldier:
	def attack_points(self) -> int:
		return 20


@trait
class Character:
	def attack_points(self) -> int:
		return 10

	def defense_points(self) -> int:
		return 20


def test_trait_can_be_used_by_a_class() -> None:
	@uses(Attacker)
	class Warrior:
		pass

	assert Warrior().attack_points() == 10


def test_composed_traits_attach_every_method() -> None:
	@uses(Attacker + Defender)
	class Warrior:
		pass

	warrior = Warrior()
	assert warrior.attack_points() == 10
	assert warrior.defense_points() == 20


def test_excluded_single_method_is_not_attached() -> None:
	@uses(Character - "defense_points")
	class Warrior:
		pass

	warrior = Warrior()
	assert warrior.attack_points() == 10
	with pytest.raises(AttributeError):
		warrior.defense_points()


def test_excluded_multiple_methods_are_not_attached() -> None:
	@uses(Character - ["defense_points", "attack_points"])
	class Warrior:
		pass

	warrior = Warrior()
	assert not hasattr(warrior, "attack_points")
	assert not hasattr(warrior, "defense_points")


def test_aliased_methods_share_the_implementation() -> None:
	@uses(Attacker & {"defense_points": "attack_points"})
	class Warrior:
		pass

	warrior = Warrior()
	assert warrior.attack_points() == 10
	assert warrior.defense_points() == 10


def test_attaching_two_traits_with_the_same_method_conflicts() -> None:
	class Warrior:
		pass

	attach(Attacker, Warrior)
	with pytest.raises(IncludedTraitConflict) as exc:
		attach(Soldier, Warrior)
	assert exc.value.names == ("attack_points",)
	assert exc.value.trait == "Soldier"
	assert Warrior().attack_points() == 10


def test_attaching_the_same_trait_twice_conflicts() -> None:
	class Warrior:
		pass

	attach(Attacker, Warrior)
	with pytest.raises(TraitConflict):
		attach(Attacker, Warrior)


def test_composing_conflicting_traits_fails_before_anything_is_installed() -> None:
	with pytest.raises(ComposedTraitConflict):

		@uses(Attacker + Soldier)
		class Warrior:
			pass


def test_attachment_conflict_installs_nothing() -> None:
	class Warrior:
		def defense_points(self) -> int:
			return 5

	with pytest.raises(IncludedTraitConflict) as exc:
		attach(Character, Warrior)
	assert exc.value.names == ("defense_points",)
	assert not hasattr(Warrior, "attack_points")
	assert Warrior().defense_points() == 5


def test_modules_and_classes_compose_with_exclusion() -> None:
	class Vitals:
		def defense_points(self) -> int:
			return 20

		def life(self) -> int:
			return 30

	@uses(Attacker + Vitals - "life")
	class Warrior:
		pass

	warrior = Warrior()
	assert warrior.attack_points() == 10
	assert warrior.defense_points() == 20
	assert not hasattr(warrior, "life")


def test_plain_class_can_be_attached_directly() -> None:
	class Healer:
		def heal(self) -> int:
			return 5

	class Cleric:
		pass

	attach(Healer, Cleric)
	assert Cleric().heal() == 5


def test_inherited_names_conflict_by_default() -> None:
	class Base:
		def attack_points(self) -> int:
			return 1

	class Warrior(Base):
		pass

	with pytest.raises(IncludedTraitConflict):
		attach(Attacker, Warrior)


def test_inherited_names_can_be_shadowed_when_configured() -> None:
	class Base:
		def attack_points(self) -> int:
			return 1

	class Warrior(Base):
		pass

	mutator = ClassMutator(MutatorOptions(include_inherited=False))
	attach(Attacker, Warrior, mutator=mutator)
	assert Warrior().attack_points() == 10
	assert Base().attack_points() == 1


class _RecordingMutator:
	def __init__(self, existing: set[str]) -> None:
		self.existing = existing
		self.defined: dict[str, object] = {}

	def method_names(self, target: object) -> set[str]:
		return set(self.existing)

	def define_method(self, target: object, name: str, impl: object) -> None:
		self.defined[name] = impl


def test_attach_goes_through_the_mutator() -> None:
	mutator = _RecordingMutator(existing=set())
	attach(Attacker + Defender, "registry", mutator=mutator)
	assert set(mutator.defined) == {"attack_points", "defense_points"}


def test_attach_checks_names_reported_by_the_mutator() -> None:
	mutator = _RecordingMutator(existing={"defense_points"})
	with pytest.raises(IncludedTraitConflict) as exc:
		attach(Attacker + Defender, "registry", mutator=mutator)
	assert exc.value.target == "'registry'"
	assert mutator.defined == {}


def test_uses_leaves_the_class_untouched_when_a_later_trait_conflicts() -> None:
	class Warrior:
		def defense_points(self) -> int:
			return 5

	with pytest.raises(IncludedTraitConflict) as exc:
		uses(Attacker, Character)(Warrior)
	assert exc.value.trait == "Character"
	assert not hasattr(Warrior, "attack_points")
	assert Warrior().defense_points() == 5


def test_uses_rejects_traits_that_clash_with_each_other() -> None:
	class Warrior:
		pass

	with pytest.raises(IncludedTraitConflict) as exc:
		uses(Attacker, Soldier)(Warrior)
	assert exc.value.names == ("attack_points",)
	assert exc.value.trait == "Soldier"
	assert not hasattr(Warrior, "attack_points")


def test_uses_attaches_several_disjoint_traits() -> None:
	@uses(Attacker, Defender)
	class Warrior:
		pass

	assert Warrior().attack_points() == 10
	assert Warrior().defense_points() == 20


def test_own_dunder_members_count_as_defined() -> None:
	def __init__(self) -> None:
		self.hp = 1

	class Warrior:
		def __init__(self) -> None:
			self.hp = 100

	class Recruit:
		pass

	with pytest.raises(IncludedTraitConflict) as exc:
		attach({"__init__": __init__}, Warrior)
	assert exc.value.names == ("__init__",)
	assert Warrior().hp == 100
	attach({"__init__": __init__}, Recruit)
	assert Recruit().hp == 1


def test_object_members_do_not_count_as_defined() -> None:
	class Warrior:
		pass

	attach({"__repr__": lambda self: "warrior"}, Warrior)
	assert repr(Warrior()) == "warrior"

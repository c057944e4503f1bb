from itertools import permutations

import pytest

from members.docs import clean_documentation, iter_locations, join_type_names, synthesize_documentation
from members.exceptions import FactContractError
from members.model import FactGroup, MemberType


@pytest.mark.parametrize(
	"names, expected",
	[
		([], "unknown type"),
		(["int"], "int"),
		(["int", "str"], "int or str"),
		(["int", "str", "float"], "int, str, or float"),
		(["a", "b", "c", "d"], "a, b, c, or d"),
	],
)
def test_join_type_names(names, expected):
	assert join_type_names(names) == expected


def test_instance_summary_lists_types_in_first_seen_order(fact):
	facts = [fact(type_name="int"), fact(type_name="str"), fact(type_name="int"), fact(type_name="float")]
	doc = synthesize_documentation(facts, MemberType.INSTANCE)
	assert doc == "Instance of int, str, or float"


def test_instance_without_facts_is_unknown_type():
	assert synthesize_documentation([], MemberType.INSTANCE) == "Instance of unknown type"


def test_constant_summary(fact):
	doc = synthesize_documentation([fact(MemberType.CONSTANT, type_name="int", doc="int(x=0) -> integer")], MemberType.CONSTANT)
	assert doc == "Constant int\n\nint(x=0) -> integer"


def test_non_value_kinds_have_no_summary(fact):
	facts = [fact(MemberType.FUNCTION, type_name="function", doc="f(a, b)")]
	assert synthesize_documentation(facts, MemberType.FUNCTION) == "f(a, b)"
	assert synthesize_documentation([], MemberType.MULTIPLE) == ""


def test_long_descriptions_are_sorted_and_deduplicated(fact):
	facts = [
		fact(MemberType.CLASS, doc="class zeta"),
		fact(MemberType.CLASS, doc="class Alpha"),
		fact(MemberType.CLASS, doc="class zeta"),
		fact(MemberType.CLASS, doc="class alpha"),
	]
	# Ordinal order puts upper case first.
	assert synthesize_documentation(facts, MemberType.CLASS) == "class Alpha\n\nclass alpha\n\nclass zeta"


def test_output_does_not_depend_on_fact_order(fact):
	facts = [
		fact(MemberType.CLASS, type_name="type", doc="class B"),
		fact(MemberType.CLASS, type_name="type", doc="class A\n\n\nwith body"),
		fact(MemberType.CLASS, type_name="type", doc="class C"),
	]
	outputs = {synthesize_documentation(order, MemberType.MULTIPLE) for order in permutations(facts)}
	assert outputs == {"class A\n\nwith body\n\nclass B\n\nclass C"}


def test_group_is_described_as_one_fact(fact):
	group = FactGroup(members=[fact(type_name="int", doc="an int"), fact(type_name="str", doc="a str")])
	doc = synthesize_documentation([group], MemberType.INSTANCE)
	assert doc == "Instance of int, str\n\nan int\n\na str"


def test_none_entries_are_skipped(fact):
	doc = synthesize_documentation([None, fact(type_name="int")], MemberType.INSTANCE, strict=False)
	assert doc == "Instance of int"
	with pytest.raises(FactContractError):
		synthesize_documentation([None], MemberType.INSTANCE, strict=True)


@pytest.mark.parametrize(
	"raw, expected",
	[
		("", ""),
		("   \n\n  ", ""),
		("a\r\nb", "a\nb"),
		("a   \n\n\n\nb\n\n", "a\n\nb"),
		("\n\n  text  \n", "text"),
	],
)
def test_clean_documentation(raw, expected):
	assert clean_documentation(raw) == expected
	assert clean_documentation(expected) == expected


def test_locations_concatenate_in_fact_order(fact, loc):
	l1, l2, l3 = loc(1), loc(2), loc(3, file_path="other.py")
	facts = [fact(locations=[l1, l2]), fact(locations=[l3])]
	assert list(iter_locations(facts)) == [l1, l2, l3]
	assert list(iter_locations(facts)) == [l1, l2, l3]


def test_locations_are_not_deduplicated(fact, loc):
	l1 = loc(5)
	facts = [fact(locations=[l1]), fact(locations=[l1])]
	assert list(iter_locations(facts)) == [l1, l1]


def test_locations_read_the_live_collection(fact, loc):
	facts = [fact(locations=[loc(1)])]
	locations = iter_locations(facts)
	facts.append(fact(locations=[loc(2)]))
	assert [l.line for l in locations] == [1, 2]


def test_summary_keeps_first_seen_type_order(fact):
	# Only long descriptions are sorted; the summary follows inference order.
	int_fact, str_fact = fact(type_name="int", doc="x"), fact(type_name="str", doc="x")
	assert synthesize_documentation([int_fact, str_fact], MemberType.INSTANCE) == "Instance of int or str\n\nx"
	assert synthesize_documentation([str_fact, int_fact], MemberType.INSTANCE) == "Instance of str or int\n\nx"

import json

import pytest

from sbdb.model import Field
from sbdb.query import (
    And,
    ClassFilter,
    ComparisonExpr,
    FieldSet,
    Filter,
    GroupFilter,
    KindFilter,
    NumStatusFilter,
    Operator,
    Or,
    df,
    eq,
    format_classes,
    ge,
    gt,
    le,
    lt,
    nd,
    ne,
    regex,
    rg,
)

SAMPLE = (
    ComparisonExpr("pole|DF"),
    ComparisonExpr("condition_code|EQ|0"),
    ComparisonExpr("albedo|DF"),
    ComparisonExpr("H|DF"),
)


def test_and_to_json():
    assert And(*SAMPLE).to_json() == '{"AND":["pole|DF","condition_code|EQ|0","albedo|DF","H|DF"]}'


def test_and_empty():
    assert And().to_json() == '{"AND":[]}'


def test_or_to_json():
    assert Or(*SAMPLE).to_json() == '{"OR":["pole|DF","condition_code|EQ|0","albedo|DF","H|DF"]}'


def test_or_empty():
    assert Or().to_json() == '{"OR":[]}'


@pytest.mark.parametrize(
    "text, want",
    [("Hello World", '"Hello World"'), ("", '""')],
)
def test_comparison_to_json(text, want):
    assert ComparisonExpr(text).to_json() == want


def test_nested_expressions():
    expr = And(Or(eq("a", "1")), df("b"))
    assert expr.to_json() == '{"AND":[{"OR":["a|EQ|1"]},"b|DF"]}'


def test_html_characters_escaped():
    assert eq("name", "a<b").to_json() == '"name|EQ|a\\u003cb"'
    assert json.loads(eq("name", "a<b&c>").to_json()) == "name|EQ|a<b&c>"


@pytest.mark.parametrize("bad", [0, 999])
def test_class_out_of_range(bad):
    with pytest.raises(ValueError):
        ClassFilter(bad)


@pytest.mark.parametrize(
    "classes, want",
    [
        ([], ""),
        ([ClassFilter.IEO], "IEO"),
        ([ClassFilter.IEO, ClassFilter.ATE], "IEO,ATE"),
        ([ClassFilter.IEO, ClassFilter.ATE, ClassFilter.APO], "IEO,ATE,APO"),
    ],
)
def test_format_classes(classes, want):
    assert format_classes(classes) == want


def test_group_str():
    assert str(GroupFilter.ANY) == ""
    assert str(GroupFilter.NEO) == "neo"
    with pytest.raises(ValueError):
        GroupFilter(999)


def test_kind_str():
    assert str(KindFilter.ANY) == ""
    assert str(KindFilter.ASTEROID) == "a"
    with pytest.raises(ValueError):
        KindFilter(999)


def test_numbered_status_str():
    assert str(NumStatusFilter.ANY) == ""
    assert str(NumStatusFilter.NUMBERED) == "n"
    with pytest.raises(ValueError):
        NumStatusFilter(999)


def test_operator_str():
    assert str(Operator.EQ) == "EQ"
    for bad in (0, 999):
        with pytest.raises(ValueError):
            Operator(bad)


@pytest.mark.parametrize(
    "got, want",
    [
        (eq("field", "value"), "field|EQ|value"),
        (ne("field", "value"), "field|NE|value"),
        (lt("field", "value"), "field|LT|value"),
        (gt("field", "value"), "field|GT|value"),
        (le("field", "value"), "field|LE|value"),
        (ge("field", "value"), "field|GE|value"),
        (rg("field", "min", "max"), "field|RG|min|max"),
        (regex("field", "value"), "field|RE|value"),
        (df("field"), "field|DF"),
        (nd("field"), "field|ND"),
    ],
)
def test_ops(got, want):
    assert got == want
    assert isinstance(got, ComparisonExpr)


def test_ops_accept_field_enum():
    assert eq(Field.NEO, "Y") == "neo|EQ|Y"


def test_fieldset_sorted_and_mutable():
    fs = FieldSet("b", Field.SPK_ID, "a")
    assert fs.names() == ["a", "b", "spkid"]
    assert str(fs) == "a,b,spkid"
    fs.remove("b")
    fs.remove("missing")
    fs.add_fields(Field.FULL_NAME, "a")
    assert list(fs) == ["a", "full_name", "spkid"]
    assert len(fs) == 3
    assert Field.SPK_ID in fs
    assert "b" not in fs


def test_filter_values_none_fields():
    with pytest.raises(ValueError):
        Filter().values()


def test_filter_values_empty_fields():
    with pytest.raises(ValueError):
        Filter(fields=FieldSet()).values()


def test_filter_values_minimum():
    assert Filter(fields=FieldSet("field")).values() == {"fields": "field"}


def test_filter_values_several_fields():
    fs = FieldSet("field1", "field2", "field3", "field4", "field5", "field6")
    assert Filter(fields=fs).values() == {"fields": "field1,field2,field3,field4,field5,field6"}


def test_filter_values_too_many_classes():
    classes = [
        ClassFilter.IEO, ClassFilter.ATE, ClassFilter.APO, ClassFilter.AMO, ClassFilter.MCA,
        ClassFilter.IMB, ClassFilter.MBA, ClassFilter.OMB, ClassFilter.TJN,
    ]
    with pytest.raises(ValueError):
        Filter(fields=FieldSet("field"), classes=classes).values()


def test_filter_values_classes():
    f = Filter(fields=FieldSet("field"), classes=[ClassFilter.IEO, ClassFilter.ATE, ClassFilter.APO])
    assert f.values() == {"fields": "field", "sb-class": "IEO,ATE,APO"}


def test_filter_values_all_options():
    f = Filter(
        fields=FieldSet("field"),
        limit=10,
        limit_from=10,
        numbered_status=NumStatusFilter.NUMBERED,
        kind=KindFilter.ASTEROID,
        group=GroupFilter.NEO,
        must_have_satellite=True,
        exclude_fragments=True,
    )
    assert f.values() == {
        "fields": "field",
        "limit": "10",
        "limit-from": "10",
        "sb-ns": "n",
        "sb-kind": "a",
        "sb-group": "neo",
        "sb-sat": "true",
        "sb-xfrag": "true",
    }


def test_filter_values_field_constraints():
    constraints = And(*SAMPLE)
    f = Filter(fields=FieldSet("field"), field_constraints=constraints)
    assert f.values() == {"fields": "field", "sb-cf": constraints.to_json()}


def test_filter_values_query():
    f = Filter(
        fields=FieldSet("spkid", "full_name", "kind", "pdes", "name", "prefix", "class", "neo", "pha", "sats"),
        limit=1,
        numbered_status=NumStatusFilter.UNNUMBERED,
    )
    assert f.values() == {
        "limit": "1",
        "sb-ns": "u",
        "fields": "class,full_name,kind,name,neo,pdes,pha,prefix,sats,spkid",
    }


def test_filter_negative_limit():
    with pytest.raises(ValueError):
        Filter(fields=FieldSet("field"), limit=-1).values()


def test_filter_encode_example():
    f = Filter(fields=FieldSet(Field.SPK_ID, Field.FULL_NAME), limit=5, kind=KindFilter.ASTEROID)
    assert f.encode() == "fields=full_name%2Cspkid&limit=5&sb-kind=a"
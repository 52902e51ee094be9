import dataclasses

import pytest

from sbdb.model import (
    Body,
    Field,
    Identity,
    NonGrav,
    Orbit,
    Physical,
    Quality,
    Solution,
    Uncertainty,
    identity_fields,
    nongrav_fields,
    orbit_fields,
    physical_fields,
    solution_fields,
    uncertainty_fields,
)


def _mapped(cls):
    return [f.metadata["sbdb"] for f in dataclasses.fields(cls)]


@pytest.mark.parametrize(
    "member, wire",
    [
        (Field.SPK_ID, "spkid"),
        (Field.FULL_NAME, "full_name"),
        (Field.T_JUPITER, "t_jup"),
        (Field.SEMIMAJOR_AXIS, "a"),
        (Field.A1, "A1"),
        (Field.SPEC_T, "spec_T"),
        (Field.DELAY_OBS_USED, "n_del_obs_used"),
    ],
)
def test_field_string_is_wire_name(member, wire):
    assert str(member) == wire
    assert member == wire
    assert f"{member}" == wire


def test_field_lookup_by_value():
    assert Field("t_jup") is Field.T_JUPITER
    assert Field("diameter_sigma") is Field.DIAMETER_SIGMA


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        Field("not_a_field")


def test_field_hashes_like_string():
    mapping = {"spkid": 1}
    assert mapping[Field("spkid")] == 1
    assert hash(Field("full_name")) == hash("full_name")


def test_field_lists_have_no_duplicates():
    for fields in (
        identity_fields(),
        orbit_fields(),
        uncertainty_fields(),
        solution_fields(),
        nongrav_fields(),
        physical_fields(),
    ):
        assert len(set(fields)) == len(fields)
        assert all(isinstance(f, Field) for f in fields)


def test_field_lists_are_fresh_copies():
    first = identity_fields()
    first.clear()
    assert len(identity_fields()) == 14
    orbit = orbit_fields()
    orbit.clear()
    assert len(orbit_fields()) == 18
    physical = physical_fields()
    physical.clear()
    assert len(physical_fields()) == 21


def test_field_lists_cover_every_field():
    covered = set(identity_fields())
    covered.update(orbit_fields())
    covered.update(uncertainty_fields())
    covered.update(solution_fields())
    covered.update(nongrav_fields())
    covered.update(physical_fields())
    assert covered == set(Field)


def test_field_list_ordering():
    assert identity_fields()[0] is Field.SPK_ID
    assert identity_fields()[-1] is Field.MOID_JUPITER
    assert orbit_fields()[-1] is Field.APHELION_DIST
    assert physical_fields()[-1] is Field.DIAMETER_SIGMA


@pytest.mark.parametrize(
    "cls, fn",
    [
        (Identity, identity_fields),
        (Orbit, orbit_fields),
        (Uncertainty, uncertainty_fields),
        (NonGrav, nongrav_fields),
        (Physical, physical_fields),
    ],
)
def test_dataclass_mapping_matches_field_list(cls, fn):
    assert _mapped(cls) == fn()


def test_solution_list_spans_solution_and_quality():
    assert _mapped(Solution) + _mapped(Quality) == solution_fields()


@pytest.mark.parametrize(
    "cls", [Identity, Orbit, Uncertainty, Solution, Quality, NonGrav, Physical]
)
def test_groups_default_to_none(cls):
    instance = cls()
    assert all(v is None for v in dataclasses.asdict(instance).values())


def test_body_defaults_are_empty_groups():
    body = Body()
    assert body.identity == Identity()
    assert body.physical == Physical()
    assert Body() == body


def test_body_groups_not_shared():
    first = Body()
    second = Body()
    first.identity.spk_id = 123
    assert second.identity.spk_id is None


def test_body_equality_reflects_values():
    a = Body(identity=Identity(spk_id=123, neo=True))
    b = Body(identity=Identity(spk_id=123, neo=True))
    c = Body(identity=Identity(spk_id=123, neo=False))
    assert a == b
    assert not (a == c)
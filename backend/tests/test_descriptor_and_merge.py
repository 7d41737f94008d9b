import pytest

from atelier.core.errors import UnknownField
from atelier.core.resources import FieldSpec, ResourceDescriptor, merge_update
from atelier.modules.body_measurements.models import BodyMeasurement
from atelier.modules.body_measurements.repository import BODY_MEASUREMENTS
from atelier.modules.trending_fashions.repository import TRENDING_FASHIONS


def test_descriptor_rejects_unknown_columns_at_build_time():
    with pytest.raises(LookupError):
        ResourceDescriptor(
            name="Broken",
            model=BodyMeasurement,
            fields=(FieldSpec("shoeSize", "shoe_size"),),
        )


def test_descriptor_resolves_public_names():
    assert BODY_MEASUREMENTS.column("chestSize") is BodyMeasurement.chest_size
    assert BODY_MEASUREMENTS.column("id") is BodyMeasurement.id
    with pytest.raises(UnknownField) as info:
        BODY_MEASUREMENTS.column("chest_size")
    assert info.value.code == "unknown_field"


def test_descriptor_owner_scoping_flags():
    assert BODY_MEASUREMENTS.owner_scoped
    assert not TRENDING_FASHIONS.owner_scoped
    assert TRENDING_FASHIONS.relation_field().name == "designId"
    assert [f.name for f in TRENDING_FASHIONS.readable_fields()] == [
        "trendStartDate",
        "trendEndDate",
        "trendDescription",
    ]


def test_merge_only_touches_present_keys():
    entity = BodyMeasurement(height=1, weight=2)
    merge_update(entity, {"height": 9}, BODY_MEASUREMENTS)
    assert (entity.height, entity.weight) == (9, 2)


def test_merge_writes_explicit_none():
    entity = BodyMeasurement(height=180, weight=80, hip_size=95)
    merge_update(entity, {"hipSize": None}, BODY_MEASUREMENTS)
    assert entity.hip_size is None
    assert entity.height == 180


def test_merge_with_empty_patch_is_noop():
    entity = BodyMeasurement(height=180, weight=80)
    assert merge_update(entity, {}, BODY_MEASUREMENTS) is entity
    assert (entity.height, entity.weight) == (180, 80)


def test_merge_rejects_unknown_keys_before_writing():
    entity = BodyMeasurement(height=180, weight=80)
    with pytest.raises(UnknownField):
        merge_update(entity, {"height": 1, "user_id": "someone-else"}, BODY_MEASUREMENTS)
    assert entity.height == 180
    assert entity.user_id is None

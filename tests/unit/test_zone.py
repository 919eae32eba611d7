"""Unit tests for zone state merging."""

from monument_safezones.arguments import ParsedArgs, parse_args
from monument_safezones.types import BoxShape, SphereShape, Vector3, ZoneShape
from monument_safezones.zone import apply_update, create_zone, edit_zone


class TestApplyUpdate:
    """Pure merge of partial updates."""

    def test_none_starts_from_zero(self):
        shape = apply_update(None, ParsedArgs())
        assert shape.offset == Vector3.zero()
        assert shape.size == Vector3.zero()
        assert shape.radius == 0.0
        assert not shape.is_box

    def test_offset_independent_of_volume(self):
        existing = ZoneShape(Vector3(1, 1, 1), BoxShape(Vector3(4, 4, 4)))
        shape = apply_update(existing, ParsedArgs(offset=Vector3(0, 5, 0)))
        assert shape.offset == Vector3(0, 5, 0)
        assert shape.size == Vector3(4, 4, 4)

    def test_size_clears_radius(self):
        existing = ZoneShape(volume=SphereShape(7.0))
        shape = apply_update(existing, ParsedArgs(size=Vector3(2, 3, 4)))
        assert shape.is_box
        assert shape.radius == 0.0

    def test_radius_clears_size(self):
        existing = ZoneShape(volume=BoxShape(Vector3(2, 3, 4)))
        shape = apply_update(existing, ParsedArgs(radius=6.0))
        assert not shape.is_box
        assert shape.size == Vector3.zero()
        assert shape.radius == 6.0

    def test_last_applied_kind_wins(self):
        shape = apply_update(None, ParsedArgs(size=Vector3(1, 1, 1)))
        shape = apply_update(shape, ParsedArgs(radius=3.0))
        shape = apply_update(shape, ParsedArgs(size=Vector3(5, 5, 5)))
        assert shape.size == Vector3(5, 5, 5)
        assert shape.radius == 0.0

    def test_existing_not_mutated(self):
        existing = ZoneShape(volume=SphereShape(7.0))
        apply_update(existing, ParsedArgs(size=Vector3(1, 1, 1), offset=Vector3(1, 0, 0)))
        assert existing.radius == 7.0
        assert existing.offset == Vector3.zero()

    def test_zero_size_is_not_a_box(self):
        shape = apply_update(ZoneShape(volume=SphereShape(4.0)), ParsedArgs(size=Vector3.zero()))
        assert not shape.is_box
        assert shape.radius == 0.0


class TestCreateZone:
    """Creation applies the default radius."""

    def test_no_geometry_gets_default_radius(self):
        shape = create_zone(ParsedArgs())
        assert not shape.is_box
        assert shape.radius == 10.0

    def test_offset_only_gets_default_radius(self):
        shape = create_zone(ParsedArgs(offset=Vector3(0, 2, 0)))
        assert shape.radius == 10.0
        assert shape.offset == Vector3(0, 2, 0)

    def test_non_positive_radius_gets_default(self):
        assert create_zone(ParsedArgs(radius=0.0)).radius == 10.0
        assert create_zone(ParsedArgs(radius=-3.0)).radius == 10.0

    def test_custom_default(self):
        assert create_zone(ParsedArgs(), default_radius=25.0).radius == 25.0

    def test_example_offset_and_radius(self):
        shape = create_zone(parse_args(["offset", "0,5,0", "radius", "10"], "maspawn"))
        assert shape.offset == Vector3(0, 5, 0)
        assert shape.size == Vector3(0, 0, 0)
        assert shape.radius == 10.0
        assert not shape.is_box

    def test_example_size(self):
        shape = create_zone(parse_args(["size", "30,30,30"], "maspawn"))
        assert shape.offset == Vector3(0, 0, 0)
        assert shape.size == Vector3(30, 30, 30)
        assert shape.radius == 0.0
        assert shape.is_box
        assert shape.extents == Vector3(15, 15, 15)


class TestEditZone:
    """Edits never inject the default radius."""

    def test_offset_edit_preserves_box(self):
        existing = ZoneShape(volume=BoxShape(Vector3(8, 8, 8)))
        shape = edit_zone(existing, ParsedArgs(offset=Vector3(0, 1, 0)))
        assert shape.is_box
        assert shape.size == Vector3(8, 8, 8)
        assert shape.radius == 0.0

    def test_edit_without_existing_has_no_default(self):
        shape = edit_zone(None, ParsedArgs(offset=Vector3(0, 1, 0)))
        assert shape.radius == 0.0

    def test_edit_to_zero_radius_kept(self):
        shape = edit_zone(ZoneShape(volume=SphereShape(5.0)), ParsedArgs(radius=0.0))
        assert shape.radius == 0.0

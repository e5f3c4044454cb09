"""Tests for the shared record behaviour: equality, ordering, builders and wire output."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from cloudstack.domain.account import Account, AccountType, User
from cloudstack.domain.base.exceptions import ValidationError
from cloudstack.domain.topology import Host, HostState, Zone


@pytest.fixture
def zone():
    return Zone.builder().id("1").name("Dev Zone 1").dns1("8.8.8.8").build()


class TestRecordBuilder:
    """Test fluent construction of records."""

    def test_build_sets_fields(self, zone):
        assert zone.id == "1"
        assert zone.name == "Dev Zone 1"
        assert zone.dns2 is None

    def test_numeric_ids_coerced_to_text(self):
        zone = Zone.builder().id(42).build()

        assert zone.id == "42"

    def test_set_by_name(self):
        zone = Zone.builder().set("id", "3").set("name", "z").build()

        assert zone.name == "z"

    def test_unknown_setter(self):
        with pytest.raises(AttributeError):
            Zone.builder().colour("red")

        with pytest.raises(AttributeError):
            Zone.builder().set("colour", "red")

    def test_invalid_value_raises_domain_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Host.builder().id("1").cpu_number("many").build()

        assert "Host" in str(exc_info.value)
        assert len(exc_info.value.details) == 1
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)

    def test_missing_required_field(self):
        with pytest.raises(ValueError):
            Zone.builder().name("nameless").build()

    def test_to_builder_copies_values(self, zone):
        renamed = zone.to_builder().name("Prod Zone").build()

        assert renamed.id == zone.id
        assert renamed.dns1 == "8.8.8.8"
        assert renamed.name == "Prod Zone"
        assert zone.name == "Dev Zone 1"

    def test_collections_are_snapshotted(self):
        # Arrange
        tags = {"xen"}
        builder = Host.builder().id("1").tags(tags)

        # Act
        tags.add("later")
        host = builder.build()

        # Assert
        assert host.tags == frozenset({"xen"})

    def test_builder_reuse_builds_equal_records(self):
        builder = Zone.builder().id("9")

        assert builder.build() == builder.build()


class TestRecordValueSemantics:
    """Test immutability, equality, hashing and ordering."""

    def test_records_are_immutable(self, zone):
        with pytest.raises(PydanticValidationError):
            zone.name = "other"

    def test_equality_and_hash(self, zone):
        same = Zone.builder().id("1").name("Dev Zone 1").dns1("8.8.8.8").build()
        different = same.to_builder().dns1("1.1.1.1").build()

        assert same == zone
        assert hash(same) == hash(zone)
        assert different != zone
        assert len({zone, same, different}) == 2

    def test_records_of_other_types_never_equal(self):
        assert Zone.builder().id("1").build() != User.builder().id("1").build()

    def test_natural_order_by_numeric_id(self):
        zones = [Zone.builder().id(i).build() for i in ("10", "2", "1")]

        assert [z.id for z in sorted(zones)] == ["1", "2", "10"]

    def test_ordering_against_other_type_unsupported(self, zone):
        with pytest.raises(TypeError):
            _ = zone < User.builder().id("1").build()

    def test_repr_shows_present_fields(self, zone):
        text = repr(zone)

        assert text.startswith("Zone(")
        assert "name='Dev Zone 1'" in text
        assert "dns2" not in text


class TestWireRendering:
    """Test from_wire / to_wire behaviour common to all records."""

    def test_from_wire_uses_wire_names(self):
        host = Host.from_wire({"id": 7, "state": "Up", "zoneid": 1, "hosttags": "a,b"})

        assert host.id == "7"
        assert host.state is HostState.UP
        assert host.zone_id == "1"
        assert host.tags == frozenset({"a", "b"})

    def test_unknown_wire_keys_ignored(self):
        zone = Zone.from_wire({"id": "1", "brandnewfield": "x"})

        assert zone == Zone.builder().id("1").build()

    def test_to_wire_omits_absent_fields(self):
        wire = Host.builder().id("1").state(HostState.MAINTENANCE).build().to_wire()

        assert wire["id"] == "1"
        assert wire["state"] == "Maintenance"
        assert "hosttags" not in wire
        assert "zoneid" not in wire
        assert "name" not in wire

    def test_to_wire_code_enum_is_number(self):
        wire = Account.builder().id("1").type(AccountType.ADMIN).build().to_wire()

        assert wire["accounttype"] == 1

    def test_python_dump_keeps_members(self):
        host = Host.builder().id("1").state("Up").build()

        assert host.model_dump()["state"] is HostState.UP

"""Tests for delegation, attributes and declarations on Presenter."""

import asyncio

import pytest

from giftwrap import MemberKind, Presenter, attribute, unwrapped, wrapped_reference
from giftwrap.exceptions import DeclarationError, MissingAttributeError, WrappedObjectError


class SimpleMapPresenter(Presenter):
    type = unwrapped()
    units = unwrapped(attribute=True)

    @attribute
    def is_metric(self):
        return self.units in self._metric_map_units()

    def contains_region(self, region_name):
        return False

    def _metric_map_units(self):
        return ["m", "km"]


class LegendPresenter(Presenter):
    line_meaning = unwrapped()

    @attribute
    @property
    def red_lines(self):
        return self.line_meaning("red")

    def yellow_lines(self):
        return self.line_meaning("yellow")


class ExplicitMapPresenter(Presenter):
    pass


ExplicitMapPresenter.unwrap_for("type", ["units", "center"])
ExplicitMapPresenter.unwrap_for("shows_roads", attribute=True)
ExplicitMapPresenter.attribute("summary")


class BrokenPresenter(Presenter):
    units = unwrapped()


BrokenPresenter.attribute("not_implemented_anywhere")


class TestDelegation:
    def test_unwrapped_members_are_delegated(self, physical_map):
        presenter = SimpleMapPresenter(physical_map)

        assert presenter.type == physical_map.type
        assert presenter.units == physical_map.units

    def test_unwrapped_methods_forward_arguments(self, traffic_legend):
        presenter = LegendPresenter(traffic_legend)

        assert presenter.line_meaning("black") == traffic_legend.line_meaning("black")
        assert presenter.yellow_lines() == "light congestion"

    def test_members_not_explicitly_unwrapped_are_not_accessible(self, physical_map):
        presenter = SimpleMapPresenter(physical_map)

        assert hasattr(physical_map, "center")
        assert not hasattr(presenter, "center")
        with pytest.raises(AttributeError):
            presenter.notes

    def test_unwrap_for_after_class_statement(self, physical_map):
        presenter = ExplicitMapPresenter(physical_map)

        assert presenter.center == ["here", "there"]
        assert presenter.shows_roads() is False
        assert ExplicitMapPresenter.declarations().delegated_names.keys() == {
            "type", "units", "center", "shows_roads",
        }

    def test_delegation_reads_current_value_of_wrapped_object(self, physical_map):
        presenter = SimpleMapPresenter(physical_map)
        physical_map.units = "km"

        assert presenter.units == "km"
        assert presenter.attributes()["is_metric"] is True


class TestAttributes:
    def test_attributes_can_include_unwrapped_members(self, physical_map):
        attributes = SimpleMapPresenter(physical_map).attributes()

        assert "units" in attributes

    def test_attributes_do_not_include_unwrapped_members_by_default(self, physical_map):
        attributes = SimpleMapPresenter(physical_map).attributes()

        assert "type" not in attributes

    def test_attributes_include_explicitly_declared_attributes(self, physical_map):
        attributes = SimpleMapPresenter(physical_map).attributes()

        assert attributes == {"units": "mi", "is_metric": False}

    def test_attribute_keys_follow_declaration_order(self, physical_map):
        assert list(SimpleMapPresenter(physical_map).attributes()) == ["units", "is_metric"]

    def test_property_attributes_are_read(self, traffic_legend):
        assert LegendPresenter(traffic_legend).attributes() == {"red_lines": "heavy congestion"}

    def test_delegated_method_attributes_are_called(self, physical_map):
        physical_map.type = "road"
        presenter = ExplicitMapPresenter(physical_map)
        presenter.summary = "road map"

        attributes = presenter.attributes()

        assert attributes["shows_roads"] is True

    def test_declared_but_unimplemented_attribute_raises(self, physical_map):
        presenter = ExplicitMapPresenter(physical_map)

        with pytest.raises(MissingAttributeError, match="summary"):
            presenter.attributes()

    def test_missing_attribute_error_is_an_attribute_error(self, physical_map):
        with pytest.raises(AttributeError):
            BrokenPresenter(physical_map).attributes()

    def test_instance_level_implementation_satisfies_attribute(self, physical_map):
        presenter = ExplicitMapPresenter(physical_map)
        presenter.summary = "a map"

        assert presenter.attributes()["summary"] == "a map"

    def test_aattributes_matches_attributes(self, physical_map):
        presenter = SimpleMapPresenter(physical_map)

        assert asyncio.run(presenter.aattributes()) == presenter.attributes()


class TestDeclarations:
    def test_dispatch_table_records_member_kinds(self):
        assert SimpleMapPresenter.member_kind("type") is MemberKind.DELEGATE
        assert SimpleMapPresenter.member_kind("is_metric") is MemberKind.LOCAL_ATTRIBUTE
        assert SimpleMapPresenter.member_kind("contains_region") is None

    def test_subclasses_inherit_declarations(self, physical_map):
        class DetailedMapPresenter(SimpleMapPresenter):
            center = unwrapped(attribute=True)

        attributes = DetailedMapPresenter(physical_map).attributes()

        assert list(attributes) == ["units", "is_metric", "center"]
        assert "center" not in SimpleMapPresenter.attribute_names()

    def test_reserved_names_cannot_be_delegated(self):
        with pytest.raises(DeclarationError):
            class _Bad(Presenter):
                attributes = unwrapped()

    def test_reserved_names_cannot_be_declared_as_attributes(self):
        with pytest.raises(DeclarationError, match="attributes"):
            ExplicitMapPresenter.attribute("attributes")

        with pytest.raises(DeclarationError, match="to_json"):
            class _Shadowing(Presenter):
                @attribute
                def to_json(self):
                    return "{}"

        assert "attributes" not in ExplicitMapPresenter.attribute_names()

    def test_invalid_names_cannot_be_delegated(self):
        with pytest.raises(DeclarationError):
            ExplicitMapPresenter.unwrap_for("not a name")

    def test_wrapped_as_exposes_private_reference(self, physical_map):
        class NamedMapPresenter(Presenter):
            type = unwrapped()

        name = NamedMapPresenter.wrapped_as("map")
        presenter = NamedMapPresenter(physical_map)

        assert name == "_map"
        assert NamedMapPresenter.__dict__["_map"].name == "_map"
        assert presenter._map is physical_map
        assert not hasattr(presenter, "map")
        assert "_map" not in NamedMapPresenter.attribute_names()

    def test_wrapped_reference_in_class_body(self, physical_map):
        class NotesPresenter(Presenter):
            _map = wrapped_reference()

            @attribute
            def note_count(self):
                return len(self._map.notes)

        assert NotesPresenter(physical_map).attributes() == {"note_count": 0}


class TestConstruction:
    def test_presenter_cannot_wrap_none(self):
        with pytest.raises(WrappedObjectError):
            SimpleMapPresenter(None)

    def test_extra_options_are_kept(self, physical_map):
        presenter = SimpleMapPresenter(physical_map, locale="en")

        assert presenter._options == {"locale": "en"}

    def test_repr_names_presenter_and_wrapped_object(self, physical_map):
        assert repr(SimpleMapPresenter(physical_map)).startswith("<SimpleMapPresenter wrapping ")

"""
Tests for the Prototype Object Model

These tests verify:
    - Own property access and assignment
    - Live delegation through create()
    - Method binding to the receiver
    - Shallow-merge semantics of extend()
    - new(), instance_of() and the global scope fallback
"""

import pytest
from prototypal.exceptions import UnboundThisError
from prototypal.prototype import (
    ProtoObject,
    constructor,
    create,
    extend,
    get_prototype_of,
    global_scope,
    has_own,
    instance_of,
    new,
    own_keys,
    reset_global_scope,
    resolve_this,
)


class TestProtoObject:
    """Test object literals."""

    def test_literal_properties(self):
        """Should expose keyword properties as attributes."""
        obj = ProtoObject(band="lame", open=False)
        assert obj.band == "lame"
        assert obj.open is False

    def test_literal_from_mapping(self):
        """Should accept a mapping of initial properties."""
        obj = ProtoObject({"name": "The Saloon"}, specials="Gin")
        assert own_keys(obj) == ["name", "specials"]

    def test_missing_property(self):
        """Should raise AttributeError for unknown names."""
        obj = ProtoObject()
        with pytest.raises(AttributeError):
            obj.band
        assert getattr(obj, "band", "none") == "none"

    def test_assignment_creates_own_property(self):
        """Should store assigned values as own properties."""
        obj = ProtoObject()
        obj.band = "lame"
        assert has_own(obj, "band")

    def test_delete_own_property(self):
        """Should remove own properties and reject unknown ones."""
        obj = ProtoObject(band="lame")
        del obj.band
        assert not has_own(obj, "band")
        with pytest.raises(AttributeError):
            del obj.band

    def test_reserved_names(self):
        """Should refuse to overwrite internal slots."""
        obj = ProtoObject()
        with pytest.raises(AttributeError):
            obj._prototype = ProtoObject()

    def test_dunder_lookup_is_not_delegated(self):
        """Should not pretend to support protocols it lacks."""
        obj = ProtoObject(__len__=lambda this: 3)
        assert not hasattr(obj, "__iter__")


class TestCreate:
    """Test prototype linking."""

    def test_create_is_empty(self):
        """Should return an object with no own properties."""
        proto = ProtoObject(band="lame")
        obj = create(proto)
        assert own_keys(obj) == []
        assert get_prototype_of(obj) is proto

    def test_create_delegates(self):
        """Should resolve missing properties through the prototype."""
        proto = ProtoObject(band="lame")
        assert create(proto).band == "lame"

    def test_create_distinct_objects(self):
        """Should allocate a new object each call, sharing the prototype."""
        proto = ProtoObject()
        first, second = create(proto), create(proto)
        assert first is not second
        assert get_prototype_of(first) is get_prototype_of(second)

    def test_delegation_is_live(self):
        """Should see prototype changes made after creation."""
        proto = ProtoObject()
        obj = create(proto)
        proto.band = "late addition"
        assert obj.band == "late addition"

    def test_own_property_shadows_prototype(self):
        """Should prefer own properties without touching the prototype."""
        proto = ProtoObject(band="lame")
        obj = create(proto)
        obj.band = "better"
        assert obj.band == "better"
        assert proto.band == "lame"

    def test_create_none(self):
        """Should allow objects with no prototype."""
        obj = create(None)
        assert get_prototype_of(obj) is None

    def test_create_rejects_non_objects(self):
        """Should reject prototypes that are not ProtoObjects."""
        with pytest.raises(TypeError):
            create({"band": "lame"})

    def test_in_operator_includes_chain(self):
        """Should report inherited names as contained."""
        obj = create(ProtoObject(band="lame"))
        assert "band" in obj
        assert "name" not in obj

    def test_dir_lists_inherited_names(self):
        """Should list own and inherited names."""
        obj = create(ProtoObject(band="lame"))
        obj.name = "bar"
        assert dir(obj) == ["band", "name"]


class TestMethodBinding:
    """Test receiver binding of functions found by lookup."""

    def test_inherited_method_binds_receiver(self):
        """Should pass the instance, not the prototype, as `this`."""
        def set_band(this, band):
            this.band = band
            return this

        proto = ProtoObject(set_band=set_band)
        obj = create(proto)
        assert obj.set_band("lame") is obj
        assert has_own(obj, "band")
        assert not has_own(proto, "band")

    def test_non_function_values_are_not_bound(self):
        """Should return callables that are not plain functions as-is."""
        obj = ProtoObject(kind=dict)
        assert obj.kind is dict


class TestExtend:
    """Test shallow-merge composition."""

    def test_returns_destination(self):
        """Should return the same destination object."""
        destination = ProtoObject()
        assert extend(destination, {"a": 1}) is destination

    def test_later_sources_win(self):
        """Should let later sources override earlier ones."""
        result = extend({}, {"name": "first", "x": 1}, {"name": "second"})
        assert result == {"name": "second", "x": 1}

    def test_shallow_copy(self):
        """Should share nested containers by reference."""
        nested = {"inner": True}
        result = extend({}, {"nested": nested})
        assert result["nested"] is nested

    def test_skips_none_sources(self):
        """Should ignore None sources."""
        assert extend({}, None, {"a": 1}, None) == {"a": 1}

    def test_copies_only_own_properties(self):
        """Should not flatten a source's prototype chain."""
        source = create(ProtoObject(inherited=True))
        source.own = True
        result = extend({}, source)
        assert result == {"own": True}

    def test_extends_proto_object(self):
        """Should write sources as own properties of a ProtoObject."""
        destination = extend(ProtoObject(), {"band": "lame"})
        assert has_own(destination, "band")

    def test_rejects_unknown_destination(self):
        """Should reject destinations that cannot hold properties."""
        with pytest.raises(TypeError):
            extend(42, {"a": 1})


class TestConstructorFunctions:
    """Test new(), instance_of() and `this` resolution."""

    def test_new_creates_instance(self):
        """Should build an instance delegating to the constructor prototype."""
        @constructor
        def Bar(this):
            this.band = "lame"

        bar = new(Bar)
        assert bar.band == "lame"
        assert get_prototype_of(bar) is Bar.prototype
        assert instance_of(bar, Bar)

    def test_new_passes_arguments(self):
        """Should forward arguments after `this`."""
        @constructor
        def Bar(this, band):
            this.band = band

        assert new(Bar, "Electric Mayhem").band == "Electric Mayhem"

    def test_new_returns_explicit_object(self):
        """Should return an object the constructor returns explicitly."""
        replacement = ProtoObject(band="other")

        @constructor
        def Bar(this):
            return replacement

        assert new(Bar) is replacement

    def test_new_rejects_plain_function(self):
        """Should refuse functions without a prototype."""
        def plain(this):
            pass

        with pytest.raises(TypeError):
            new(plain)

    def test_instance_of_unrelated(self):
        """Should be False for objects outside the constructor's chain."""
        @constructor
        def Bar(this):
            pass

        assert not instance_of(ProtoObject(), Bar)
        assert not instance_of(None, Bar)

    def test_resolve_this_sloppy_falls_back_to_global(self):
        """Should bind a missing `this` to the global scope."""
        try:
            assert resolve_this(None) is global_scope
        finally:
            reset_global_scope()

    def test_resolve_this_strict_raises(self):
        """Should raise in strict mode."""
        with pytest.raises(UnboundThisError):
            resolve_this(None, strict=True)

    def test_reset_global_scope(self):
        """Should clear leaked properties."""
        global_scope.leaked = True
        reset_global_scope()
        assert own_keys(global_scope) == []

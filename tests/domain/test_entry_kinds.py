"""Tests for the shared entry-kind classification."""

import pytest

from docrank.domain.models import (
    Class,
    ClassType,
    Constructor,
    Doc,
    Exception_,
    ExtensionConstructor,
    Field,
    KindClass,
    Method,
    Module,
    ModuleType,
    TypeDecl,
    TypeExtension,
    Val,
)
from docrank.domain.services.entry_kinds import entry_type, is_type_bearing, kind_class

ALL_KINDS = [
    (Doc(), KindClass.DOC),
    (TypeDecl(), KindClass.TYPE_DECL),
    (Module(), KindClass.MODULE),
    (Exception_(type="string -> exn"), KindClass.EXCEPTION),
    (ClassType(), KindClass.CLASS_TYPE),
    (Method(), KindClass.METHOD),
    (Class(), KindClass.CLASS),
    (TypeExtension(), KindClass.TYPE_EXTENSION),
    (ExtensionConstructor(type="int -> t"), KindClass.EXTENSION_CONSTRUCTOR),
    (ModuleType(), KindClass.MODULE_TYPE),
    (Constructor(type="'a -> 'a option"), KindClass.CONSTRUCTOR),
    (Field(type="int"), KindClass.FIELD),
    (Val(type="'a list -> int"), KindClass.VAL),
]


class TestKindClass:
    @pytest.mark.parametrize("kind,expected", ALL_KINDS)
    def test_projection_erases_payload(self, kind, expected: KindClass) -> None:
        """Every EntryKind variant maps to exactly one KindClass."""
        assert kind_class(kind) is expected

    def test_projection_covers_every_kind_class(self) -> None:
        """The projection is onto: no KindClass is left without a variant."""
        assert {kind_class(k) for k, _ in ALL_KINDS} == set(KindClass)

    def test_unknown_kind_is_rejected(self) -> None:
        """Anything outside the closed variant set is a programming error."""
        with pytest.raises(AssertionError):
            kind_class(object())  # type: ignore[arg-type]


class TestTypeBearing:
    @pytest.mark.parametrize("kind,_cls", ALL_KINDS)
    def test_exactly_five_variants_carry_a_type(self, kind, _cls) -> None:
        """Exception, ExtensionConstructor, Constructor, Field, Val are type-bearing."""
        expected = isinstance(kind, Exception_ | ExtensionConstructor | Constructor | Field | Val)
        assert is_type_bearing(kind) is expected

    def test_entry_type_returns_payload(self) -> None:
        assert entry_type(Val(type="'a list -> int")) == "'a list -> int"
        assert entry_type(Field(type="int")) == "int"
        assert entry_type(Exception_(type="exn")) == "exn"

    def test_entry_type_none_for_untyped(self) -> None:
        assert entry_type(Module()) is None
        assert entry_type(TypeDecl(manifest="int")) is None

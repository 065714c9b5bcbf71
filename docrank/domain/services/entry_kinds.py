"""Entry-kind classification shared by reasoning and cost assignment.

Why: One explicit projection from the full EntryKind union to KindClass, so
kind logic is not re-derived in two places.
"""

from __future__ import annotations

from typing import assert_never

from docrank.domain.models import (
    Class,
    ClassType,
    Constructor,
    Doc,
    EntryKind,
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
from docrank.domain.types import TypeSignature


def kind_class(kind: EntryKind) -> KindClass:
    """Erase the payload of an EntryKind."""
    match kind:
        case Doc():
            return KindClass.DOC
        case TypeDecl():
            return KindClass.TYPE_DECL
        case Module():
            return KindClass.MODULE
        case Exception_():
            return KindClass.EXCEPTION
        case ClassType():
            return KindClass.CLASS_TYPE
        case Method():
            return KindClass.METHOD
        case Class():
            return KindClass.CLASS
        case TypeExtension():
            return KindClass.TYPE_EXTENSION
        case ExtensionConstructor():
            return KindClass.EXTENSION_CONSTRUCTOR
        case ModuleType():
            return KindClass.MODULE_TYPE
        case Constructor():
            return KindClass.CONSTRUCTOR
        case Field():
            return KindClass.FIELD
        case Val():
            return KindClass.VAL
        case _:
            assert_never(kind)


def entry_type(kind: EntryKind) -> TypeSignature | None:
    """Inner type signature of a type-bearing kind, None for the others."""
    match kind:
        case Exception_(type=t) | ExtensionConstructor(type=t) | Constructor(type=t):
            return t
        case Field(type=t) | Val(type=t):
            return t
        case _:
            return None


def is_type_bearing(kind: EntryKind) -> bool:
    return isinstance(kind, Exception_ | ExtensionConstructor | Constructor | Field | Val)

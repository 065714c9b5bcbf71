# docrank/domain/models.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from docrank.domain.types import Cost, TypeSignature

# ---------------------------------------------------------------------------
# EntryKind: the full tagged union, one frozen dataclass per variant.
# Exception, ExtensionConstructor, Constructor, Field and Val carry the inner
# type signature used for type matching.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Doc:
    """Documentation-only entry (a page or section, not an identifier)."""


@dataclass(frozen=True)
class TypeDecl:
    manifest: str | None = None


@dataclass(frozen=True)
class Module:
    pass


@dataclass(frozen=True)
class Exception_:
    type: TypeSignature


@dataclass(frozen=True)
class ClassType:
    pass


@dataclass(frozen=True)
class Method:
    pass


@dataclass(frozen=True)
class Class:
    pass


@dataclass(frozen=True)
class TypeExtension:
    pass


@dataclass(frozen=True)
class ExtensionConstructor:
    type: TypeSignature


@dataclass(frozen=True)
class ModuleType:
    pass


@dataclass(frozen=True)
class Constructor:
    type: TypeSignature


@dataclass(frozen=True)
class Field:
    type: TypeSignature


@dataclass(frozen=True)
class Val:
    type: TypeSignature


EntryKind = (
    Doc
    | TypeDecl
    | Module
    | Exception_
    | ClassType
    | Method
    | Class
    | TypeExtension
    | ExtensionConstructor
    | ModuleType
    | Constructor
    | Field
    | Val
)


class KindClass(Enum):
    """Payload-erased projection of EntryKind, used for weight lookups."""

    DOC = "doc"
    TYPE_DECL = "type_decl"
    MODULE = "module"
    EXCEPTION = "exception"
    CLASS_TYPE = "class_type"
    METHOD = "method"
    CLASS = "class"
    TYPE_EXTENSION = "type_extension"
    EXTENSION_CONSTRUCTOR = "extension_constructor"
    MODULE_TYPE = "module_type"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    VAL = "val"


class NameMatch(Enum):
    """How well one query word matches the name of an entry."""

    DOT_SUFFIX = "dot_suffix"
    PREFIX_SUFFIX = "prefix_suffix"
    SUB_DOT = "sub_dot"
    SUB_UNDERSCORE = "sub_underscore"
    SUB = "sub"
    LOWERCASE = "lowercase"
    DOC = "doc"  # matched only by surrounding documentation, not the identifier


@dataclass(frozen=True)
class Entry:
    """
    Immutable indexed documentation item eligible for search results.

    - name:                fully qualified name, e.g. "Stdlib.List.map"
    - doc_html:            rendered documentation ("" means undocumented)
    - kind:                EntryKind variant, possibly carrying a type signature
    - is_from_module_type: entry was inherited through a module type signature
    - cost:                ranking cost for the current query (lower ranks higher)

    NOTE: cost is overwritten per query via update_entry_cost, which returns a copy.
    """

    name: str
    doc_html: str
    kind: EntryKind
    is_from_module_type: bool = False
    cost: Cost = 0


@dataclass(frozen=True)
class Reasoning:
    """Every reason an entry would rank higher or lower, without weighting them.

    Invariant: type_distance is not None iff type_in_query and type_in_entry.
    """

    is_stdlib: bool
    name_length: int
    has_doc: bool
    name_matches: tuple[NameMatch, ...]
    type_distance: int | None
    type_in_query: bool
    type_in_entry: bool
    kind: KindClass
    is_from_module_type: bool

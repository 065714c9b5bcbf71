"""Pure reasoning extraction for entry ranking.

Why (SAM): Collects every qualitative reason an entry would rank higher or
lower for a query. Deciding which reason matters more is left to the cost
assigner (domain/services/cost.py).

Functions:
- name_match_with_word: best NameMatch of one query word against a name
- name_matches_with_words: one NameMatch per query word, in query order
- compute_reasoning: full Reasoning bundle for (query, entry)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from docrank.domain.errors import ValidationError
from docrank.domain.models import Doc, Entry, NameMatch, Reasoning
from docrank.domain.services.entry_kinds import entry_type, is_type_bearing, kind_class
from docrank.domain.types import TypeSignature

STDLIB_PREFIX = "Stdlib."

TypeDistanceFn = Callable[[TypeSignature, TypeSignature], int]

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _lower_ascii(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def name_match_with_word(query_word: str, name: str) -> NameMatch:
    """Classify how query_word matches name; the first rule that holds wins.

    A word without uppercase letters matches case-insensitively; a word with
    uppercase letters matches the name verbatim, with LOWERCASE as the only
    case-insensitive fallback.

    Examples:
        >>> name_match_with_word("map", "List.map")
        <NameMatch.DOT_SUFFIX: 'dot_suffix'>
        >>> name_match_with_word("map", "mapping")
        <NameMatch.PREFIX_SUFFIX: 'prefix_suffix'>
        >>> name_match_with_word("Foo", "foo")
        <NameMatch.LOWERCASE: 'lowercase'>
    """
    low_word = _lower_ascii(query_word)
    has_case = low_word != query_word
    if not has_case:
        name = _lower_ascii(name)

    if query_word == name or name.endswith("." + query_word):
        return NameMatch.DOT_SUFFIX
    if (
        name.startswith(query_word)
        or name.endswith(query_word)
        or "(" + query_word in name
        or query_word + ")" in name
    ):
        return NameMatch.PREFIX_SUFFIX
    if "." + query_word in name or query_word + "." in name:
        return NameMatch.SUB_DOT
    if "_" + query_word in name or query_word + "_" in name:
        return NameMatch.SUB_UNDERSCORE
    if query_word in name:
        return NameMatch.SUB
    if has_case and low_word in _lower_ascii(name):
        return NameMatch.LOWERCASE
    return NameMatch.DOC


def name_matches_with_words(query_words: Sequence[str], entry: Entry) -> tuple[NameMatch, ...]:
    # Documentation entries never get credit for the shape of their name.
    if isinstance(entry.kind, Doc):
        return tuple(NameMatch.DOC for _ in query_words)
    return tuple(name_match_with_word(word, entry.name) for word in query_words)


def compute_reasoning(
    query_words: Sequence[str],
    query_type: TypeSignature | None,
    entry: Entry,
    *,
    distance: TypeDistanceFn | None = None,
) -> Reasoning:
    """Compute the reasoning for the cost of an entry.

    Args:
        query_words: Query tokens, matched independently against entry.name
        query_type: Optional query type signature
        entry: Candidate entry
        distance: Type distance capability (e.g. TypeDistancePort.distance);
                  only called when both the query and the entry carry a type

    Returns:
        Reasoning with one name match per query word (same order).

    Raises:
        ValidationError: If a type distance is needed but none was given
    """
    type_in_entry = is_type_bearing(entry.kind)
    type_in_query = query_type is not None

    type_distance: int | None = None
    if type_in_query and type_in_entry:
        if distance is None:
            raise ValidationError("a type distance is required when the query carries a type")
        type_distance = distance(query_type, entry_type(entry.kind))

    return Reasoning(
        is_stdlib=entry.name.startswith(STDLIB_PREFIX),
        name_length=len(entry.name.encode("utf-8")),
        has_doc=entry.doc_html != "",
        name_matches=name_matches_with_words(query_words, entry),
        type_distance=type_distance,
        type_in_query=type_in_query,
        type_in_entry=type_in_entry,
        kind=kind_class(entry.kind),
        is_from_module_type=entry.is_from_module_type,
    )

"""
Biomarker reference lookup.

Names coming from lab reports rarely match catalog ids exactly, so lookup
runs an ordered chain of resolvers; the first one that produces a catalog
id wins:

    1. exact id ("apoB")
    2. lowercase id ("HDL" -> "hdl")
    3. alias table ("ldl-c" -> "ldl", "t4, total" -> "totalT4")
    4. camelCase guess ("vitamin d" -> "vitaminD")

An unresolvable name is not an error; callers get None.
"""
import re
from typing import Callable, List, Optional

from .definitions import BiomarkerReference, Category
from .reference_data import BIOMARKER_ID_ALIASES, BIOMARKER_REFERENCES

Resolver = Callable[[str], Optional[str]]

_CAMEL_BOUNDARY = re.compile(r"[^a-z0-9]+(.)")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def resolve_exact(name: str) -> Optional[str]:
    return name if name in BIOMARKER_REFERENCES else None


def resolve_lowercase(name: str) -> Optional[str]:
    lowered = name.strip().lower()
    return lowered if lowered in BIOMARKER_REFERENCES else None


def resolve_alias(name: str) -> Optional[str]:
    target = BIOMARKER_ID_ALIASES.get(name.strip().lower())
    if target and target in BIOMARKER_REFERENCES:
        return target
    return None


def resolve_camel_case(name: str) -> Optional[str]:
    camel = _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name.strip().lower())
    return camel if camel in BIOMARKER_REFERENCES else None


RESOLVERS: List[Resolver] = [
    resolve_exact,
    resolve_lowercase,
    resolve_alias,
    resolve_camel_case,
]


def resolve_biomarker_id(name: str) -> Optional[str]:
    """Return the canonical catalog id for a name, or None if nothing matches."""
    if not name:
        return None
    for resolver in RESOLVERS:
        resolved = resolver(name)
        if resolved is not None:
            return resolved
    return None


def lookup(name: str) -> Optional[BiomarkerReference]:
    """Get the reference for an id, alias or lab-report name."""
    resolved = resolve_biomarker_id(name)
    if resolved is None:
        return None
    return BIOMARKER_REFERENCES[resolved]


def normalize_biomarker_name(name: str) -> str:
    """
    Map an extracted biomarker name to a stable key.

    Known markers resolve to their catalog id; anything else becomes a
    snake-ish lowercase key ("Galectin-3 Level" -> "galectin_3_level").
    """
    resolved = resolve_biomarker_id(name)
    if resolved is not None:
        return resolved
    return _NON_ALNUM.sub("_", name.strip().lower())


def references_by_category(category: Category) -> List[BiomarkerReference]:
    return [ref for ref in BIOMARKER_REFERENCES.values() if ref.category == category]


def calculated_references() -> List[BiomarkerReference]:
    return [ref for ref in BIOMARKER_REFERENCES.values() if ref.is_calculated]


ALL_BIOMARKER_IDS = tuple(BIOMARKER_REFERENCES.keys())

"""
Ancestor chain traversal and private name resolution.

Python has no access modifiers; a member declared as ``__name`` inside class
``Owner`` is stored as ``_Owner__name`` (name mangling). Resolving a member
therefore means trying, for every class of the ancestor chain, the name as
mangled for that class and then the name as given.
"""

from typing import Any


def ancestor_chain(target: Any) -> tuple[type, ...]:
    """
    Return the types searched for members of target.

    Ordered from the concrete type of target to object.
    """
    return type(target).__mro__


def mangled_name(owner: type, name: str) -> str | None:
    """
    Return name as stored when declared private in owner.

    Accepts both ``"count"`` and ``"__count"``. Returns None for dunder names,
    for single-underscore names (protected by convention, never mangled) and
    for classes whose name is only underscores.

    Example:
        >>> mangled_name(Base, "count")
        '_Base__count'
    """
    if name.endswith("__"):
        return None
    stripped = owner.__name__.lstrip("_")
    if not stripped:
        return None
    if name.startswith("__"):
        member = name
    elif name.startswith("_"):
        return None
    else:
        member = "__" + name
    return f"_{stripped}{member}"


def candidate_names(owner: type, name: str) -> list[str]:
    """Return attribute names under which owner may store name, mangled first."""
    names = []
    mangled = mangled_name(owner, name)
    if mangled is not None:
        names.append(mangled)
    if name not in names:
        names.append(name)
    return names

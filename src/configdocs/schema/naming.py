# topmark:header:start
#
#   project      : ConfigDocs
#   file         : naming.py
#   file_relpath : src/configdocs/schema/naming.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Rename policies mapping declared field names to serialized keys.

Declared names are expected in ``snake_case`` (the Python convention); a policy
re-joins the underscore-separated words in the target convention.
"""

from __future__ import annotations

from enum import Enum


class RenamePolicy(str, Enum):
    """Naming conventions for serialized keys.

    Values match the spelling commonly used by serialization libraries
    (``rename_all = "camelCase"``).
    """

    LOWERCASE = "lowercase"
    UPPERCASE = "UPPERCASE"
    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    KEBAB_CASE = "kebab-case"
    SCREAMING_KEBAB_CASE = "SCREAMING-KEBAB-CASE"

    @classmethod
    def parse(cls, value: RenamePolicy | str) -> RenamePolicy:
        """Return the policy for ``value`` (a member or its string value).

        Raises:
            ValueError: If ``value`` names no known policy.
        """
        if isinstance(value, RenamePolicy):
            return value
        for member in cls:
            if member.value == value:
                return member
        known = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown rename policy '{value}' (expected one of: {known})")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def apply_rename(name: str, policy: RenamePolicy | str | None) -> str:
    """Return ``name`` converted to the convention of ``policy``.

    Args:
        name (str): Declared field name (``snake_case``).
        policy (RenamePolicy | str | None): Target convention; None keeps ``name``.

    Returns:
        str: The serialized key.
    """
    if policy is None:
        return name
    policy = RenamePolicy.parse(policy)
    words = name.split("_")

    if policy is RenamePolicy.LOWERCASE:
        return name.lower()
    if policy is RenamePolicy.UPPERCASE:
        return name.upper()
    if policy is RenamePolicy.PASCAL_CASE:
        return "".join(_capitalize(w) for w in words)
    if policy is RenamePolicy.CAMEL_CASE:
        head, *tail = words
        return head + "".join(_capitalize(w) for w in tail)
    if policy is RenamePolicy.SNAKE_CASE:
        return name
    if policy is RenamePolicy.SCREAMING_SNAKE_CASE:
        return name.upper()
    if policy is RenamePolicy.KEBAB_CASE:
        return name.replace("_", "-")
    # SCREAMING-KEBAB-CASE
    return name.upper().replace("_", "-")

"""Enumerations for leonidas modes and tracker association levels."""

from enum import Enum


class Mode(str, Enum):
    """Phase requested by the invoking workflow."""

    PLAN = "plan"
    EXECUTE = "execute"

    def __str__(self) -> str:
        return self.value


class AuthorAssociation(str, Enum):
    """Relationship of a comment author to the repository.

    Mirrors GitHub's ``author_association`` field. ``NONE`` means the author
    has no established relationship with the repository.
    """

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    COLLABORATOR = "COLLABORATOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR"
    FIRST_TIMER = "FIRST_TIMER"
    MANNEQUIN = "MANNEQUIN"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def approver_values(cls) -> list[str]:
        """Associations that may appear in an approver allowlist.

        ``NONE`` is never a valid approver association.
        """
        return [member.value for member in cls if member is not cls.NONE]

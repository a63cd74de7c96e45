"""
Role declarations, the access policy evaluator and the ownership check.

Role requirements are declared per operation in an explicit table. A router
declares a default for all of its operations and may override it per
operation; the per-operation declaration always wins.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional
from realtor_api.models.user import User, UserRole
from realtor_api.utils.exceptions import OwnershipError


PUBLIC: FrozenSet[UserRole] = frozenset()


class RoleDeclarations:
    """
    Per-operation role table for one router.

    Args:
        default: Roles applied to operations without their own declaration
        operations: Operation name -> roles permitted to invoke it
    """

    def __init__(
        self,
        default: Iterable[UserRole] = PUBLIC,
        operations: Optional[Mapping[str, Iterable[UserRole]]] = None
    ):
        self.default = frozenset(default)
        self.operations: Dict[str, FrozenSet[UserRole]] = {
            name: frozenset(roles) for name, roles in (operations or {}).items()
        }

    def roles_for(self, operation: str) -> FrozenSet[UserRole]:
        """Roles required by an operation, falling back to the router default."""
        return self.operations.get(operation, self.default)

    def is_public(self, operation: str) -> bool:
        return not self.roles_for(operation)


def evaluate_access(required_roles: FrozenSet[UserRole], user: Optional[User]) -> bool:
    """
    Decide whether a user may invoke an operation.

    An empty requirement is public and always allowed. Otherwise the user must
    exist and hold one of the required roles.
    """
    if not required_roles:
        return True
    if user is None:
        return False
    return user.role in required_roles


def check_ownership(resource_owner_id: int, acting_user_id: int) -> None:
    """
    Confirm the acting user is the recorded owner of a resource.

    Raises:
        OwnershipError: If the ids differ
    """
    if resource_owner_id != acting_user_id:
        raise OwnershipError()

"""
Role and ownership rules for hotel, room, booking and review operations.

Every rule is a plain function of the caller's role and the identities
involved, so services can evaluate them without a request object.
"""

from dataclasses import dataclass

from hotel_booking_service.exceptions import Forbidden

CUSTOMER = "customer"
OWNER = "owner"


@dataclass(frozen=True)
class PolicyDecision:
    allowed: bool
    reason: str = ""

    def __bool__(self):
        return self.allowed


ALLOWED = PolicyDecision(allowed=True)


def forbid(reason):
    return PolicyDecision(allowed=False, reason=reason)


def can_create_hotel(role):
    """Only owners may create hotels."""
    if role != OWNER:
        return forbid("Only hotel owners can create hotels.")
    return ALLOWED


def can_mutate_room(role, hotel_owner_id, caller_id):
    """Only the owner of the hotel may add or change its rooms."""
    if role != OWNER:
        return forbid("Only hotel owners can manage rooms.")
    if hotel_owner_id != caller_id:
        return forbid("You do not own this hotel.")
    return ALLOWED


def can_book(role):
    """Bookings, cancellations and reviews are customer actions."""
    if role != CUSTOMER:
        return forbid("Only customers can manage bookings.")
    return ALLOWED


def can_manage_booking(role, booking_user_id, caller_id):
    """Cancel and review require the caller to be the booking's guest."""
    decision = can_book(role)
    if not decision:
        return decision
    if booking_user_id != caller_id:
        return forbid("This booking belongs to another user.")
    return ALLOWED


def enforce(decision):
    """Raise Forbidden if the decision does not allow the action."""
    if not decision.allowed:
        raise Forbidden(detail=decision.reason or None)
    return decision

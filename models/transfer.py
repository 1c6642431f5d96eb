"""
Transfer offer DTO for Footy Career.
Offers are ephemeral: pruned once past expires_round or when any offer is accepted.
"""
from dataclasses import dataclass
from typing import Dict, Any

from .constants import ROLES, TIERS
from .errors import ValidationError


@dataclass
class TransferOffer:
    id: str
    club_name: str
    tier: str
    team_ranking: int
    salary: int
    contract_length: int
    role: str
    reason: str
    expires_round: int

    def __post_init__(self) -> None:
        if self.tier not in TIERS:
            raise ValidationError(f"Unknown tier {self.tier!r}", {"field": "tier"})
        if self.role not in ROLES:
            raise ValidationError(f"Unknown role {self.role!r}", {"field": "role"})
        if self.salary < 0 or self.contract_length < 1:
            raise ValidationError("Offer salary must be >= 0 and contract_length >= 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "club_name": self.club_name,
            "tier": self.tier,
            "team_ranking": self.team_ranking,
            "salary": self.salary,
            "contract_length": self.contract_length,
            "role": self.role,
            "reason": self.reason,
            "expires_round": self.expires_round,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransferOffer":
        return cls(
            id=data["id"],
            club_name=data["club_name"],
            tier=data["tier"],
            team_ranking=data.get("team_ranking", 0),
            salary=data["salary"],
            contract_length=data["contract_length"],
            role=data["role"],
            reason=data.get("reason", ""),
            expires_round=data["expires_round"],
        )

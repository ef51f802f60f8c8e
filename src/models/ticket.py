"""Ticket payload model."""
import json
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class TicketPayload:
    """Data encoded into the ticket QR code."""

    id: str
    name: str
    student_id: str
    batch: str
    ticket_number: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "studentId": self.student_id,
            "batch": self.batch,
            "ticketNumber": self.ticket_number,
        }

    def to_qr_string(self) -> str:
        """Compact JSON string embedded in the QR code."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

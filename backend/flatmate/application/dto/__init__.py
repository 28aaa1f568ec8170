"""Data Transfer Objects returned by the HTTP layer."""

from flatmate.application.dto.chat import MessageDTO, ChatTurnDTO
from flatmate.application.dto.conversation import ConversationDTO, ConversationListDTO
from flatmate.application.dto.listing import ListingDTO
from flatmate.application.dto.appointment import AppointmentDTO
from flatmate.application.dto.lease import LeaseAnalysisDTO

__all__ = [
    "MessageDTO",
    "ChatTurnDTO",
    "ConversationDTO",
    "ConversationListDTO",
    "ListingDTO",
    "AppointmentDTO",
    "LeaseAnalysisDTO",
]

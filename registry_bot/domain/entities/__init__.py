"""
Доменные сущности (Domain Entities).
"""

from .company import CompanyInfo, ActivityEntry
from .update import ChatRef, TextMessage, NonTextMessage, OtherUpdate, Update
from .outbound import OutboundText, OutboundDocument, OutboundMessage

__all__ = [
    "CompanyInfo",
    "ActivityEntry",
    "ChatRef",
    "TextMessage",
    "NonTextMessage",
    "OtherUpdate",
    "Update",
    "OutboundText",
    "OutboundDocument",
    "OutboundMessage",
]

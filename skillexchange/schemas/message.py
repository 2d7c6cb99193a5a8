from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    receiver_id: int
    content: str = Field(..., max_length=5000)


class MessageResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ConversationSummary(BaseModel):
    counterpart_id: int
    last_message: MessageResponse
    is_unread: bool = Field(..., description="Last message is unread by the viewer")
    unread_count: int = 0

# sns_signature/common/protocol.py
from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional


class Notification(BaseModel):
    """SNS HTTP/S delivery envelope, as posted to a subscribed endpoint."""
    Type: str  # "Notification"
    MessageId: str
    TopicArn: str
    Message: str
    Timestamp: str
    Subject: Optional[str] = None
    SignatureVersion: Optional[str] = None
    Signature: Optional[str] = None  # b64
    SigningCertURL: Optional[str] = None
    UnsubscribeURL: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    def as_message(self) -> Dict[str, str]:
        """Plain field mapping with unset fields left out."""
        return self.model_dump(exclude_none=True)

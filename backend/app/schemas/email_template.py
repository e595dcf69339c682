from pydantic import Field

from app.schemas.common import CamelModel


class EmailTemplateCreate(CamelModel):
    name: str = Field(min_length=1)
    subject: str
    body: str  # may reference {name} and {position}
    type: str = "rejection"


class EmailTemplate(EmailTemplateCreate):
    id: str

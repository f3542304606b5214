from typing import Optional, Union

from pydantic import BaseModel, field_validator

ContactId = Union[int, str]


class DraftContact(BaseModel):
    name: str = ""
    phone: str = ""
    email: str = ""
    tag: Optional[str] = ""

    @field_validator("tag", mode="before")
    @classmethod
    def tag_or_empty(cls, v):
        return "" if v is None else v


class Contact(DraftContact):
    id: ContactId

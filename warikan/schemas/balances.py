from pydantic import BaseModel, Field


class MemberBalance(BaseModel):
    member: str
    paid: int
    fair_share: int = Field(alias="fairShare")
    balance: int

    class Config:
        populate_by_name = True

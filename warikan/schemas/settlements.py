from pydantic import BaseModel, Field


class Settlement(BaseModel):
    from_member: str = Field(alias="from")
    to: str
    amount: int

    class Config:
        populate_by_name = True
        frozen = True

from pydantic import BaseModel, Field
from typing import List


class GroupCreate(BaseModel):
    name: str = Field(min_length=1)
    members: List[str]


class GroupOut(BaseModel):
    name: str
    members: List[str]

from pydantic import BaseModel, Field, PositiveInt


class ExpenseBase(BaseModel):
    group_name: str = Field(alias="groupName")
    expense_name: str = Field(alias="expenseName")
    payer: str
    amount: int

    class Config:
        populate_by_name = True


class ExpenseCreate(ExpenseBase):
    expense_name: str = Field(alias="expenseName", min_length=1)
    amount: PositiveInt


class ExpenseOut(ExpenseBase):
    id: int

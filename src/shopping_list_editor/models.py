from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    quantity: int

    def __str__(self) -> str:
        return f"{self.quantity} x {self.name}"

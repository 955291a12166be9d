from typing import Optional

from pydantic import BaseModel

from .enums import Status


class DataRow(BaseModel):
    """
    One row of a batch, rebuilt on every request and never stored.
    """

    name: str
    row_id: int
    content: str
    status: Status
    tag: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

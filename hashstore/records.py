from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class StoreRecord(BaseModel):
    """
    Mirrors the on-disk store file schema exactly:
      {
        "_hash": "<md5 of data>",
        "data": { "<key>": <value>, ... }
      }
    """

    model_config = ConfigDict(populate_by_name=True)

    store_hash: str = Field(alias="_hash")
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any]) -> "StoreRecord":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

from __future__ import annotations
from typing import List
from pydantic import BaseModel


class AdOut(BaseModel):
    id: int
    image_url: str
    title: str
    description: str


class AdListOut(BaseModel):
    rotation_seconds: int
    ads: List[AdOut]


class CurrentAdOut(BaseModel):
    index: int
    ad: AdOut

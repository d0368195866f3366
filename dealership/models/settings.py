from typing import Optional

from pydantic import BaseModel, Field


class FormOptionIn(BaseModel):
    category: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    order: Optional[int] = None


class KeyedSettingIn(BaseModel):
    """A row of ``form_texts`` or ``site_settings``."""

    category: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)
    value: str
    description: str = ""


class SettingUpdate(BaseModel):
    category: Optional[str] = None
    value: Optional[str] = None
    label: Optional[str] = None
    order: Optional[int] = None
    key: Optional[str] = None
    description: Optional[str] = None

from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    content: str
    last_modified: Optional[datetime] = None
    content_length: int
    word_count: int


class BackupSummary(BaseModel):
    """Схема элемента списка резервных копий"""
    name: str
    label: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BackupListResponse(BaseModel):
    """Схема для списка резервных копий"""
    backups: List[BackupSummary]
    total: int


class BackupResponse(BackupSummary):
    """Схема для ответа с содержимым резервной копии"""
    content: str
    content_length: int

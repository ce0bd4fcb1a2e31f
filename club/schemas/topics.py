from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TopicUpsert(BaseModel):
    category: str
    title: str = Field(min_length=1, max_length=200)
    content: str = ""


class UserRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str


class TopicRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: str
    category_model: Optional[CategoryRead] = None
    title: str
    content: str
    create_user_id: int
    create_user: Optional[UserRef] = None
    create_date: Optional[datetime] = None
    update_date: Optional[datetime] = None
    recommend: bool = False
    top: bool = False
    lock: bool = False
    visit_count: int = 0
    reply_count: int = 0
    last_reply_user: Optional[UserRef] = None
    last_reply_date: Optional[datetime] = None


class TopicCreated(BaseModel):
    id: int


class TopicPage(BaseModel):
    rows: List[TopicRead]
    page_index: int
    page_size: int
    total: int

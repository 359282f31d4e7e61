from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# edited 이벤트에서 덮어쓰는 필드 (name, yearCreated 제외)
EDITABLE_FIELDS = {"description", "image_url", "html_url", "topics"}


class RepositoryRecord(BaseModel):
    """repositories 컬렉션 document. name이 lookup key"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    year_created: Optional[int] = Field(default=None, alias="yearCreated")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    html_url: Optional[str] = Field(default=None, alias="htmlUrl")
    topics: List[str] = Field(default_factory=list)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)

    def editable_fields(self) -> dict:
        return self.model_dump(by_alias=True, include=EDITABLE_FIELDS)

"""
Data models for rendered Exposify output.
"""

from pydantic import BaseModel, Field


class RenderedContent(BaseModel):
    """An HTML fragment plus the status code the host page should answer with."""
    html: str = ""
    status_code: int = Field(default=200)  # 404 when the property was not found

    @property
    def found(self) -> bool:
        return self.status_code != 404

    def __str__(self) -> str:
        return self.html

"""
Campus Data Backend — Article Schemas
======================================

What:  API contract for /api/articles.
"""


from pydantic import Field, NaiveDatetime

from campusdata.schemas.common import CamelModel


class ArticleFields(CamelModel):
    title: str = Field(min_length=1)
    url: str = Field(min_length=1, examples=["https://www.ucsb.edu/news"])
    explanation: str
    email: str = Field(min_length=3, examples=["cgaucho@ucsb.edu"])
    date_added: NaiveDatetime = Field(examples=["2022-01-03T00:00:00"])


class ArticleResponse(ArticleFields):
    id: int

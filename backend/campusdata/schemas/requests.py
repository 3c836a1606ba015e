"""
Campus Data Backend — Request-Tracking Schemas
===============================================

What:  API contracts for /api/recommendationrequest and /api/helprequest.
"""


from pydantic import Field, NaiveDatetime

from campusdata.schemas.common import CamelModel


class RecommendationRequestFields(CamelModel):
    requester_email: str = Field(
        min_length=3,
        description="Email of the person requesting a recommendation",
        examples=["cgaucho@ucsb.edu"],
    )
    professor_email: str = Field(
        min_length=3,
        description="Email of the professor asked for the recommendation",
        examples=["phtcon@ucsb.edu"],
    )
    explanation: str = Field(
        description="What the recommendation is for",
        examples=["For BS/MS program"],
    )
    date_requested: NaiveDatetime = Field(examples=["2022-01-03T00:00:00"])
    date_needed: NaiveDatetime = Field(examples=["2022-02-03T00:00:00"])
    done: bool = Field(description="Whether the recommendation has been sent")


class RecommendationRequestResponse(RecommendationRequestFields):
    id: int


class HelpRequestFields(CamelModel):
    requester_email: str = Field(min_length=3, examples=["cgaucho@ucsb.edu"])
    team_id: str = Field(min_length=1, examples=["s22-5pm-3"])
    table_or_breakout_room: str = Field(min_length=1, examples=["7"])
    request_time: NaiveDatetime = Field(examples=["2022-04-20T17:35:00"])
    explanation: str = Field(examples=["Need help with Swagger-ui"])
    solved: bool


class HelpRequestResponse(HelpRequestFields):
    id: int

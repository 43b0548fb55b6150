"""
Practice Models

Pydantic models for a parsed swim practice. Every model is frozen: a parse
builds plain lists first and constructs each set and the practice once they
are complete.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """One 'reps x distance stroke' line"""
    type: Literal["exercise"] = "exercise"
    reps: int = Field(default=1, ge=1)
    distance: int = Field(..., ge=1, description="Yards per repetition")
    stroke: str = "Free"
    specifications: Optional[str] = Field(default=None, description="Free text qualifying the stroke, e.g. 'left arm'")
    pace: str = ""
    interval: int = Field(default=0, ge=0, description="Send-off per repetition in seconds, 0 if none")
    total_yardage: int = Field(..., ge=1)
    estimated_time: int = Field(..., ge=0)
    original_text: str = ""

    class Config:
        frozen = True


class Rest(BaseModel):
    """An explicit recovery period"""
    type: Literal["rest"] = "rest"
    duration: int = Field(default=60, ge=1, description="Seconds")
    original_text: str = ""

    class Config:
        frozen = True


class Comment(BaseModel):
    """Any line that is not an exercise, rest or multiplier"""
    type: Literal["comment"] = "comment"
    text: str

    class Config:
        frozen = True


LineItem = Annotated[Union[Exercise, Rest, Comment], Field(discriminator="type")]


class SwimSet(BaseModel):
    """
    A run of line items sharing one multiplier.

    yardage and estimated_time are per pass, without the multiplier.
    """
    multiplier: int = Field(default=1, ge=1)
    items: List[LineItem] = Field(..., min_length=1)
    yardage: int = Field(default=0, ge=0)
    estimated_time: int = Field(default=0, ge=0)

    class Config:
        frozen = True

    @property
    def total_yardage(self) -> int:
        return self.yardage * self.multiplier

    @property
    def total_time(self) -> int:
        return self.estimated_time * self.multiplier


class ParsedPractice(BaseModel):
    """Result of parsing one practice"""
    sets: List[SwimSet] = Field(default_factory=list)
    total_yardage: int = Field(default=0, ge=0)
    estimated_time: int = Field(default=0, ge=0, description="Seconds")
    difficulty: int = Field(default=0, ge=0, le=100)
    comments: List[str] = Field(default_factory=list)

    class Config:
        frozen = True

    @classmethod
    def empty(cls) -> "ParsedPractice":
        return cls()


class PracticeMetrics(BaseModel):
    """The numbers stored alongside a saved practice"""
    total_yardage: int = 0
    estimated_time: int = 0
    difficulty: int = Field(default=0, ge=0, le=100)
    difficulty_label: str = "Very Easy"

    class Config:
        frozen = True

from typing import Annotated, Literal
from pydantic import BaseModel, Field, field_validator

NameStr = Annotated[str, Field(min_length=1, max_length=120)]

class ExerciseRecord(BaseModel):
    name: NameStr
    muscle: str
    type: Literal["Primary", "Secondary"]
    equipment: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise name cannot be blank")
        return v2

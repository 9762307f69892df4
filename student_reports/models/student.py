from pydantic import BaseModel, Field


class StudentRecord(BaseModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    age: int = Field(ge=0)
    gender: str
    city: str
    average_grade: float = Field(alias="averageGrade", strict=True)

    class Config:
        populate_by_name = True
        frozen = True

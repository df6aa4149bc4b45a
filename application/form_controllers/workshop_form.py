from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from application.form_controllers.base import FormController, require_future_date
from domain.value_objects.entity_type import EntityType


class WorkshopForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    category_id: int = Field(..., gt=0)
    instructor_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    detailed_description: str | None = None
    workshop_date: date
    workshop_time: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1, description="Free text, e.g. 2 hours")
    location: str = Field(..., min_length=1)
    price: float = Field(0, ge=0)
    total_spots: int = Field(..., ge=1)
    level: str = Field("Beginner", min_length=1)
    learning_outcomes: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)

    @field_validator("workshop_date")
    @classmethod
    def validate_workshop_date(cls, v: date) -> date:
        return require_future_date(v, "Workshop")


class WorkshopFormController(FormController[WorkshopForm]):
    entity_type = EntityType.WORKSHOP
    form_model = WorkshopForm

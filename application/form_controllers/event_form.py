from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from application.form_controllers.base import FormController, require_future_date
from domain.value_objects.entity_type import EntityType


class AgendaItem(BaseModel):
    time: str = Field(..., min_length=1)
    activity: str = Field(..., min_length=1)


class EventForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    category_id: int = Field(..., gt=0)
    organizer_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    detailed_description: str | None = None
    event_date: date
    event_time: str = Field(..., min_length=1, description="Free text, e.g. 08:00 AM")
    location: str = Field(..., min_length=1)
    price: float = Field(0, ge=0)
    total_spots: int = Field(..., ge=1)
    agenda: list[AgendaItem] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    what_to_expect: list[str] = Field(default_factory=list)

    @field_validator("event_date")
    @classmethod
    def validate_event_date(cls, v: date) -> date:
        return require_future_date(v, "Event")


class EventFormController(FormController[EventForm]):
    entity_type = EntityType.EVENT
    form_model = EventForm

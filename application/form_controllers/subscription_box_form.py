from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from application.form_controllers.base import FormController
from domain.value_objects.entity_type import EntityType


class BoxItem(BaseModel):
    item_name: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)
    description: str | None = None


class SubscriptionBoxForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    frequency: Literal["weekly", "bi-weekly", "monthly"]
    items: list[BoxItem] = Field(default_factory=list)
    is_active: bool = True


class SubscriptionBoxFormController(FormController[SubscriptionBoxForm]):
    entity_type = EntityType.SUBSCRIPTION_BOX
    form_model = SubscriptionBoxForm

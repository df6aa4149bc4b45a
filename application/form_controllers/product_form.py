from pydantic import BaseModel, ConfigDict, Field

from application.form_controllers.base import FormController
from domain.value_objects.entity_type import EntityType


class ProductForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    category_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, description="Sales unit, e.g. kg or bunch")
    description: str = Field(..., min_length=1)
    stock_quantity: int = Field(0, ge=0)
    origin: str | None = None
    details: dict[str, str] = Field(default_factory=dict)


class ProductFormController(FormController[ProductForm]):
    entity_type = EntityType.PRODUCT
    form_model = ProductForm

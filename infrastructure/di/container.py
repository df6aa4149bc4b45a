from lagom import Container

from application.form_controllers.event_form import EventFormController
from application.form_controllers.product_form import ProductFormController
from application.form_controllers.profile_form import ProfileFormController
from application.form_controllers.subscription_box_form import SubscriptionBoxFormController
from application.form_controllers.workshop_form import WorkshopFormController
from application.ports.image_store import ImageStore
from application.ports.record_service import RecordService
from application.sagas.image_upsert_saga import ImageUpsertSaga
from application.use_cases.record_use_cases import (
    ChangeSubscriptionStatusUseCase,
    DeleteRecordUseCase,
)
from infrastructure.config import Settings, settings
from infrastructure.image_stores.http_image_store import HttpImageStore
from infrastructure.record_services.http_record_service import HttpRecordService


def create_container(app_settings: Settings | None = None) -> Container:
    config = app_settings or settings
    container = Container()

    container[Settings] = config

    # Upstream clients
    container[ImageStore] = HttpImageStore(
        base_url=config.catalog_api_url,
        timeout=config.upload_timeout_seconds,
    )
    container[RecordService] = HttpRecordService(
        base_url=config.catalog_api_url,
        token=config.catalog_api_token,
        timeout=config.request_timeout_seconds,
    )

    # Register Sagas
    container[ImageUpsertSaga] = lambda c: ImageUpsertSaga(
        image_store=c[ImageStore],
        record_service=c[RecordService],
    )

    # Form Controllers
    container[EventFormController] = lambda c: EventFormController(c[ImageUpsertSaga])
    container[WorkshopFormController] = lambda c: WorkshopFormController(c[ImageUpsertSaga])
    container[ProductFormController] = lambda c: ProductFormController(c[ImageUpsertSaga])
    container[SubscriptionBoxFormController] = lambda c: SubscriptionBoxFormController(
        c[ImageUpsertSaga],
    )
    container[ProfileFormController] = lambda c: ProfileFormController(c[ImageUpsertSaga])

    # Record Use Cases
    container[DeleteRecordUseCase] = lambda c: DeleteRecordUseCase(
        record_service=c[RecordService],
    )
    container[ChangeSubscriptionStatusUseCase] = lambda c: ChangeSubscriptionStatusUseCase(
        record_service=c[RecordService],
    )

    return container

class AppError:
    """Represents different categories of application errors."""

    def __init__(self, category: str, message: str) -> None:
        # 'validation', 'not_found', 'storage_unavailable', 'service_unavailable'
        self.category = category
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.category!r}, {self.message!r})"


class UpsertFailure(AppError):
    """Failed upsert, carrying the name the admin knows the entity by."""

    def __init__(self, category: str, message: str, entity_display_name: str) -> None:
        super().__init__(category, message)
        self.entity_display_name = entity_display_name

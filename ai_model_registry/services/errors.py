# COMPONENT: REGISTRY ERRORS
# REQUIREMENTS SATISFIED: human-readable failures for create/update/delete
"""ai_model_registry/services/errors.py

Failures raised by the registry service. The router turns them into
HTTP 400 / 404 responses carrying ``str(exc)`` as the detail.
"""


class RegistryError(Exception):
    """Base class for registry failures."""


class EmptyFieldError(RegistryError):
    def __init__(self, field_title: str):
        self.field_title = field_title
        super().__init__(f"'{field_title}' cannot be empty")


class ModelNotFoundError(RegistryError):
    def __init__(self, model_id: int):
        self.model_id = model_id
        super().__init__("Model not found")

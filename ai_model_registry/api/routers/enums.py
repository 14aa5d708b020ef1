from fastapi import APIRouter

from ai_model_registry.schemas.models import LicenseType, ModelComplexity, ModelType

router = APIRouter()


@router.get("/enums")
def get_enums():
    # values accepted for modelType / complexity / licenseType, in declaration order
    return {
        "modelTypes": [t.value for t in ModelType],
        "complexities": [c.value for c in ModelComplexity],
        "licenseTypes": [lt.value for lt in LicenseType],
    }

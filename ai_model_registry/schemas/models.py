# COMPONENT: API SCHEMAS AND DATA MODELS
# REQUIREMENTS SATISFIED: AI model record contract, partial-update request shape
"""
ai_model_registry/schemas/models.py

Defines the Pydantic models used throughout the AI Model Registry API.

This module contains the canonical enumerations and the request and
response schemas for model creation, partial update, retrieval and
listing. Python attributes are snake_case; the JSON wire format uses the
camelCase names (``modelType``, ``githubStars``, ``publishedDate`` ...).
Both spellings are accepted on input.

Key responsibilities:
    - Define the fixed enumerations (model type, complexity, license)
    - Define the stored record (``AIModel``) and its nested metrics
    - Define the create request and the all-optional update patch
    - Define the ``(id, record)`` pair returned by list and search
"""
from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelType(str, Enum):
    TABULAR = "Tabular"
    COMPUTER_VISION = "ComputerVision"
    NLP = "NLP"
    LLM = "LLM"
    VISION_MODEL = "VisionModel"
    AUDIO_MODEL = "AudioModel"
    AGENTS = "Agents"


class ModelComplexity(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    RESEARCH = "Research"


class LicenseType(str, Enum):
    OPEN_SOURCE = "OpenSource"
    COMMERCIAL = "Commercial"
    ACADEMIC = "Academic"
    RESEARCH_ONLY = "ResearchOnly"


class _CamelModel(BaseModel):
    # model_type / model_size would otherwise clash with pydantic's "model_" namespace.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class PerformanceMetrics(_CamelModel):
    accuracy: Optional[float] = None
    training_time: Optional[str] = Field(None, examples=["12h on 8xA100"])
    model_size: Optional[str] = Field(None, examples=["1.3B parameters"])


class AIModelCreate(_CamelModel):
    # Emptiness of name/link is checked by the registry service so the
    # caller gets the field title in the error message.
    name: str = Field(..., examples=["bert-base-uncased"])
    description: str = ""
    model_type: ModelType
    tags: List[str] = Field(default_factory=list)
    link: str = Field(..., examples=["https://huggingface.co/google-bert/bert-base-uncased"])
    submitter_name: str = ""
    submitter_link: str = ""
    complexity: ModelComplexity
    license_type: LicenseType
    github_stars: Optional[int] = None
    paper_link: Optional[str] = None
    framework_used: Optional[str] = Field(None, examples=["PyTorch"])
    performance_metrics: Optional[PerformanceMetrics] = None


class AIModelUpdate(_CamelModel):
    """
    Partial update request.

    Every field defaults to ``None``. For the plain fields a ``None`` means
    "keep the current value". For the optional fields (``github_stars``,
    ``paper_link``, ``framework_used``, ``performance_metrics``) an explicit
    ``null`` in the request clears the value; leaving the key out keeps it.
    ``model_fields_set`` tells the two cases apart.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    model_type: Optional[ModelType] = None
    tags: Optional[List[str]] = None
    link: Optional[str] = None
    submitter_name: Optional[str] = None
    submitter_link: Optional[str] = None
    complexity: Optional[ModelComplexity] = None
    license_type: Optional[LicenseType] = None
    github_stars: Optional[int] = None
    paper_link: Optional[str] = None
    framework_used: Optional[str] = None
    performance_metrics: Optional[PerformanceMetrics] = None


class AIModel(_CamelModel):
    id: int
    name: str
    description: str
    model_type: ModelType
    tags: List[str]
    link: str
    submitter_name: str
    submitter_link: str
    complexity: ModelComplexity
    license_type: LicenseType
    github_stars: Optional[int] = None
    paper_link: Optional[str] = None
    framework_used: Optional[str] = None
    performance_metrics: Optional[PerformanceMetrics] = None
    published_date: datetime


class ModelEntry(BaseModel):
    id: int
    model: AIModel


class CreatedModel(BaseModel):
    id: int


# Required in some Pydantic v2 setups when using __future__.annotations.
PerformanceMetrics.model_rebuild()
AIModelCreate.model_rebuild()
AIModelUpdate.model_rebuild()
AIModel.model_rebuild()
ModelEntry.model_rebuild()
CreatedModel.model_rebuild()

"""Backend-neutral model selector.

``LanguageModel`` is a closed union over the supported backend families. Code
that needs to branch on the family calls :func:`model_family` instead of
inspecting concrete types ad hoc.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from .anthropic_model import AnthropicModel
from .cloud_model import CloudModel
from .open_ai_model import CustomOpenAiModel, OpenAiModel


LanguageModel = Union[OpenAiModel, CustomOpenAiModel, AnthropicModel, CloudModel]


class ModelFamily(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    CLOUD = "cloud"


def model_family(model: LanguageModel) -> ModelFamily:
    """Return the backend family a selector belongs to.

    Raises:
        TypeError: when ``model`` is not a member of the union.
    """
    if isinstance(model, (OpenAiModel, CustomOpenAiModel)):
        return ModelFamily.OPENAI
    if isinstance(model, AnthropicModel):
        return ModelFamily.ANTHROPIC
    if isinstance(model, CloudModel):
        return ModelFamily.CLOUD
    raise TypeError(f"not a language model selector: {model!r}")


__all__ = [
    "LanguageModel",
    "ModelFamily",
    "model_family",
]

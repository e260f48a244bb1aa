"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``completion_providers.base.models_parts`` so callers keep a single stable
import path.
"""

from .models_parts.message import ChatMessage, Role
from .models_parts.open_ai_model import (
    CustomOpenAiModel,
    OpenAiModel,
    OpenAiModelSelector,
    parse_open_ai_model,
)
from .models_parts.anthropic_model import AnthropicModel
from .models_parts.cloud_model import CloudModel
from .models_parts.language_model import LanguageModel, ModelFamily, model_family
from .models_parts.chat_request import ChatRequest
from .models_parts.provider_config import ProviderConfig

__all__ = [
    "ChatMessage",
    "Role",
    "OpenAiModel",
    "CustomOpenAiModel",
    "OpenAiModelSelector",
    "parse_open_ai_model",
    "AnthropicModel",
    "CloudModel",
    "LanguageModel",
    "ModelFamily",
    "model_family",
    "ChatRequest",
    "ProviderConfig",
]

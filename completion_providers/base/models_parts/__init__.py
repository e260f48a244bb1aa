"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`completion_providers.base.models_parts` if needed, while
`completion_providers.base.models` remains the primary stable import path.
"""

from .message import ChatMessage, Role
from .open_ai_model import CustomOpenAiModel, OpenAiModel, OpenAiModelSelector, parse_open_ai_model
from .anthropic_model import AnthropicModel
from .cloud_model import CloudModel
from .language_model import LanguageModel, ModelFamily, model_family
from .chat_request import ChatRequest
from .provider_config import ProviderConfig

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

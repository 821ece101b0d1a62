"""Runtime settings and the option values they can take."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

DEFAULT_OPENROUTER_MODEL = "google/gemini-2.5-flash-lite"
DEFAULT_OLLAMA_MODEL = "qwen3:0.6b"
DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"


class Provider(Enum):
    """Where inference runs."""

    OPENROUTER = "openrouter"
    OLLAMA = "ollama"
    LOCAL = "local"


class ThinkingDisplay(Enum):
    """How model thinking is shown in the chat."""

    OFF = "off"
    INLINE = "inline"
    FULL = "full"


class ToolDisplayVerbosity(Enum):
    """How much detail tool calls show in the chat."""

    DEFAULT = "default"
    MINIMAL = "minimal"
    FULL = "full"


class ReasoningEffort(Enum):
    """Reasoning effort levels understood by OpenRouter."""

    XHIGH = "xhigh"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    MINIMAL = "minimal"
    NONE = "none"


class OllamaThinkLevel(Enum):
    """Thinking levels understood by Ollama."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Ollama's "think" option is either a plain switch or a level.
OllamaThink = Union[bool, OllamaThinkLevel]


@dataclass(frozen=True)
class Reasoning:
    """Reasoning request options for OpenRouter."""

    effort: Optional[ReasoningEffort] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    """The effective configuration of a running session."""

    provider: Provider = Provider.OPENROUTER
    model: str = DEFAULT_OPENROUTER_MODEL
    openrouter_api_key: Optional[str] = None
    ollama_base_url: str = DEFAULT_OLLAMA_BASE_URL
    streaming_enabled: bool = True
    skip_confirmations: bool = False
    thinking_display: ThinkingDisplay = ThinkingDisplay.INLINE
    tool_display_verbosity: ToolDisplayVerbosity = ToolDisplayVerbosity.DEFAULT
    openrouter_reasoning: Optional[Reasoning] = None
    ollama_think: Optional[OllamaThink] = None
    context_max_tokens: int = 0
    context_warn_ratio: float = 0.8


def parse_ollama_think(text: str) -> OllamaThink:
    """Parse an Ollama think value: "true", "false" or a level name."""
    if text == "true":
        return True
    if text == "false":
        return False
    try:
        return OllamaThinkLevel(text)
    except ValueError:
        raise ValueError(f"invalid ollama think value: {text!r}") from None


def ollama_think_label(think: Optional[OllamaThink]) -> str:
    """Short label for an Ollama think setting."""
    if think is None or think is False:
        return "off"
    if think is True:
        return OllamaThinkLevel.HIGH.value
    return think.value


def openrouter_reasoning_label(reasoning: Optional[Reasoning]) -> str:
    """Short label for an OpenRouter reasoning setting."""
    if reasoning is None or reasoning.effort is None:
        return "off"
    return reasoning.effort.value


def reasoning_label(settings: Settings) -> str:
    """Short label for the reasoning level of the active provider."""
    if settings.provider is Provider.OPENROUTER:
        return openrouter_reasoning_label(settings.openrouter_reasoning)
    if settings.provider is Provider.OLLAMA:
        return ollama_think_label(settings.ollama_think)
    return "—"
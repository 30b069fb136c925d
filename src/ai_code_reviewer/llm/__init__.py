"""
LLM Review Engine

This module provides prompt construction and the chat completion
client used to review individual diff chunks.
"""

from .prompts import PromptBuilder
from .client import ReviewClient, GenerationConfig

__all__ = ['PromptBuilder', 'ReviewClient', 'GenerationConfig']

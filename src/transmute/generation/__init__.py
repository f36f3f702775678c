"""Prompting and the external generation call."""

from transmute.generation.client import EMPTY_OUTPUT_PLACEHOLDER, GenerationClient
from transmute.generation.prompt import build_prompt, extract_code_block

__all__ = ["EMPTY_OUTPUT_PLACEHOLDER", "GenerationClient", "build_prompt", "extract_code_block"]

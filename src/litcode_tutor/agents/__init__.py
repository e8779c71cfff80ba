"""Tutor workflows: prompt building and the SocraticTutor facade."""

from litcode_tutor.agents.prompt_builder import PreparedPrompt, build_prompt
from litcode_tutor.agents.prompt_loader import PromptData, load_prompt, render_template
from litcode_tutor.agents.tutor import SocraticTutor

__all__ = [
    "PreparedPrompt",
    "PromptData",
    "SocraticTutor",
    "build_prompt",
    "load_prompt",
    "render_template",
]

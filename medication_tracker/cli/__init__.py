"""Text menu interface for medication tracker."""

from .menu import MenuApp, parse_unsigned, prompt_patient_name

__all__ = ["MenuApp", "parse_unsigned", "prompt_patient_name"]

"""modules/wizard: Four-step packing wizard state machine."""

from modules.wizard.controller import WizardController, WizardSnapshot, WizardStep

__all__ = ["WizardController", "WizardSnapshot", "WizardStep"]

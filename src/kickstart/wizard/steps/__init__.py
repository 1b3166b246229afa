"""Wizard step definitions."""

from kickstart.wizard.steps.base import Step
from kickstart.wizard.steps.features import ApiStep, StateManagementStep, StylingStep, TestingStep
from kickstart.wizard.steps.finish import DeploymentStep, EditorStep, GitStep
from kickstart.wizard.steps.project import (
    CodeQualityStep,
    FrameworkStep,
    LanguageStep,
    NextjsOptionsStep,
    PackageManagerStep,
    RoutingStep,
)

__all__ = [
    "ApiStep",
    "CodeQualityStep",
    "DeploymentStep",
    "EditorStep",
    "FrameworkStep",
    "GitStep",
    "LanguageStep",
    "NextjsOptionsStep",
    "PackageManagerStep",
    "RoutingStep",
    "StateManagementStep",
    "Step",
    "StylingStep",
    "TestingStep",
]

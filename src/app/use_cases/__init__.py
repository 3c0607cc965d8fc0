"""Use cases do gateway: orquestração entre sanitizer e colaboradores."""

from .onboarding import (
    CompleteOnboardingUseCase,
    OnboardingResult,
    OnboardingStep,
    UploadProfilePhotoUseCase,
)
from .payments import CreatePaymentRecordUseCase, UpdatePaymentStatusUseCase
from .profiles import SaveProfileUseCase

__all__ = [
    "CompleteOnboardingUseCase",
    "CreatePaymentRecordUseCase",
    "OnboardingResult",
    "OnboardingStep",
    "SaveProfileUseCase",
    "UpdatePaymentStatusUseCase",
    "UploadProfilePhotoUseCase",
]

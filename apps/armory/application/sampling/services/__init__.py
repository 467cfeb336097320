"""Sampling Services."""

from apps.armory.application.sampling.services.sampling_service import SamplingService

__all__ = ["SamplingService"]

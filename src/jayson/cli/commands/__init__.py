"""Command handlers for the jayson CLI."""

from .base import BaseCommandHandler
from .check import CheckHandler
from .detect import DetectHandler
from .generate import GenerateHandler
from .init import InitHandler
from .report import ReportHandler
from .template import TemplateHandler
from .validate import ValidateHandler

__all__ = [
    "BaseCommandHandler",
    "CheckHandler",
    "DetectHandler",
    "GenerateHandler",
    "InitHandler",
    "ReportHandler",
    "TemplateHandler",
    "ValidateHandler",
]

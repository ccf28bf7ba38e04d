#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
GardenStockBot - Custom Exception Hierarchy
Structured error handling for all GSB services
"""

# ============================================================================
# BASE EXCEPTIONS
# ============================================================================

class GardenBotBaseException(Exception):
    """
    Base exception for all GardenStockBot errors.

    All custom exceptions inherit from this to allow catching all GSB-specific errors.
    Includes structured error data support.
    """
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self):
        """Convert exception to structured dictionary for logging/API responses."""
        return {
            'error': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigServiceError(GardenBotBaseException):
    """Base exception for all configuration service errors."""

class ConfigLoadError(ConfigServiceError):
    """Raised when configuration loading fails."""

class ConfigValidationError(ConfigServiceError):
    """Raised when configuration validation fails."""


# ============================================================================
# FEED EXCEPTIONS
# ============================================================================

class FeedError(GardenBotBaseException):
    """Base exception for all upstream feed errors."""

class FeedNetworkError(FeedError):
    """Raised when the feed endpoint cannot be reached (transport failure)."""

class FeedStatusError(FeedError):
    """Raised when the feed endpoint answers with a non-success status code."""

    def __init__(self, message: str, status: int, error_code: str = None, details: dict = None):
        details = dict(details or {})
        details.setdefault('status', status)
        super().__init__(message, error_code=error_code, details=details)
        self.status = status

class FeedParseError(FeedError):
    """Raised when the feed body is not a well-formed JSON document."""


# ============================================================================
# NOTIFICATION EXCEPTIONS
# ============================================================================

class NotificationError(GardenBotBaseException):
    """Base exception for all notification delivery errors."""

class DestinationUnavailableError(NotificationError):
    """Raised when the configured output channel cannot be resolved."""

class DeliveryError(NotificationError):
    """Raised when sending a notification to the output channel fails."""


# ============================================================================
# DISCORD BOT EXCEPTIONS
# ============================================================================

class BotServiceError(GardenBotBaseException):
    """Base exception for all bot service errors."""

class RegistrationError(BotServiceError):
    """Raised when application command registration fails at startup."""


# ============================================================================
# SCHEDULING EXCEPTIONS
# ============================================================================

class SchedulerError(GardenBotBaseException):
    """Base exception for all scheduler errors."""

class CycleOverlapError(SchedulerError):
    """Raised when a polling cycle is started while the previous one is still running."""

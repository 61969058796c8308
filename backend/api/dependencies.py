"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

All repositories share one Supabase client. The notifier owns a
background worker, so the container also has an explicit
startup()/shutdown() lifecycle driven by the application lifespan.
"""

import logging
from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.activity.interfaces import IActivityService
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.feedback.service import FeedbackService
    from modules.notifications.dispatcher import QueuedNotifier
    from modules.projects.interfaces import IProjectService
    from modules.verification.interfaces import IVerificationService
    from shared.security import SecretHasher, TokenIssuer

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: "Settings | None" = None) -> None:
        self._settings = settings or get_settings()
        self._db: "Client | None" = None
        self._hasher: "SecretHasher | None" = None
        self._tokens: "TokenIssuer | None" = None
        self._notifier: "QueuedNotifier | None" = None
        self._user_repository: "UserRepository | None" = None
        self._verification_service: "IVerificationService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._activity_service: "IActivityService | None" = None
        self._project_service: "IProjectService | None" = None
        self._feedback_service: "FeedbackService | None" = None

    # -------------------------------------------------------------------------
    # Infrastructure
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self._settings)
        return self._db

    @property
    def hasher(self) -> "SecretHasher":
        if self._hasher is None:
            from shared.security import SecretHasher
            self._hasher = SecretHasher()
        return self._hasher

    @property
    def tokens(self) -> "TokenIssuer":
        if self._tokens is None:
            from shared.security import TokenIssuer
            self._tokens = TokenIssuer(
                self._settings.jwt_secret,
                algorithm=self._settings.jwt_algorithm,
                expires_days=self._settings.jwt_expires_days,
            )
        return self._tokens

    @property
    def notifier(self) -> "QueuedNotifier":
        """Get the queued email notifier (Resend if configured, else log-only)."""
        if self._notifier is None:
            from modules.notifications.dispatcher import QueuedNotifier
            from modules.notifications.mailer import LoggingMailer, ResendMailer

            if self._settings.resend_api_key:
                mailer = ResendMailer(self._settings.resend_api_key, self._settings.mail_from)
            else:
                logger.warning("RESEND_API_KEY not set; emails will only be logged")
                mailer = LoggingMailer()

            self._notifier = QueuedNotifier(
                mailer,
                max_attempts=self._settings.notification_max_attempts,
                retry_backoff_seconds=self._settings.notification_retry_backoff_seconds,
            )
        return self._notifier

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def verification(self) -> "IVerificationService":
        """Get the email verification service instance."""
        if self._verification_service is None:
            from modules.verification.repository import (
                OtpRepository,
                VerifiedEmailRepository,
            )
            from modules.verification.service import VerificationService
            self._verification_service = VerificationService(
                otps=OtpRepository(self.db),
                verified=VerifiedEmailRepository(self.db),
                users=self.user_repository,
                hasher=self.hasher,
                notifier=self.notifier,
                otp_length=self._settings.otp_length,
                otp_ttl_minutes=self._settings.otp_ttl_minutes,
                verified_ttl_hours=self._settings.verified_email_ttl_hours,
                support_email=self._settings.support_email,
            )
        return self._verification_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                verification=self.verification,
                hasher=self.hasher,
                tokens=self.tokens,
                notifier=self.notifier,
            )
        return self._auth_service

    @property
    def activity(self) -> "IActivityService":
        """Get the activity log service instance."""
        if self._activity_service is None:
            from modules.activity.repository import ActivityRepository
            from modules.activity.service import ActivityService
            self._activity_service = ActivityService(ActivityRepository(self.db))
        return self._activity_service

    @property
    def projects(self) -> "IProjectService":
        """Get the project service instance."""
        if self._project_service is None:
            from modules.projects.repository import ProjectRepository
            from modules.projects.service import ProjectService
            self._project_service = ProjectService(
                repository=ProjectRepository(self.db),
                activity=self.activity,
                notifier=self.notifier,
                frontend_url=self._settings.frontend_url,
                revenue_per_project=self._settings.revenue_per_project,
                currency_symbol=self._settings.currency_symbol,
            )
        return self._project_service

    @property
    def feedback(self) -> "FeedbackService":
        if self._feedback_service is None:
            from modules.feedback.repository import FeedbackRepository
            from modules.feedback.service import FeedbackService
            self._feedback_service = FeedbackService(FeedbackRepository(self.db))
        return self._feedback_service

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def startup(self) -> None:
        """
        Connect to the store and start background workers.

        Building the client makes no network call, so one row is read
        from the users table to prove the store is reachable.

        Raises:
            RuntimeError: If the store or token secret is not configured
            Exception: Whatever the client raises when the store is unreachable
        """
        self.user_repository.ping()
        logger.info("Connected to Supabase at %s", self._settings.supabase_url)
        _ = self.tokens
        self.notifier.start()

    async def shutdown(self) -> None:
        """Flush queued emails and stop background workers."""
        if self._notifier is not None:
            await self._notifier.stop(
                timeout=self._settings.notification_shutdown_timeout_seconds
            )

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._hasher = None
        self._tokens = None
        self._notifier = None
        self._user_repository = None
        self._verification_service = None
        self._auth_service = None
        self._activity_service = None
        self._project_service = None
        self._feedback_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_verification_service() -> "IVerificationService":
    """FastAPI dependency for verification service."""
    return get_container().verification


def get_activity_service() -> "IActivityService":
    """FastAPI dependency for activity service."""
    return get_container().activity


def get_project_service() -> "IProjectService":
    """FastAPI dependency for project service."""
    return get_container().projects


def get_feedback_service() -> "FeedbackService":
    """FastAPI dependency for feedback service."""
    return get_container().feedback

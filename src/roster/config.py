"""Settings from the environment, logging setup and service wiring."""

import functools
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from roster.application import AppointmentService, ContactService, DeletePolicy, TaskService
from roster.domain import ConfigurationError
from roster.infrastructure import InMemoryRecordStore, to_contact_phone

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    appointment_delete_policy: DeletePolicy = DeletePolicy.STRICT
    contact_delete_policy: DeletePolicy = DeletePolicy.LENIENT
    task_delete_policy: DeletePolicy = DeletePolicy.LENIENT
    phone_region: str = "US"


@dataclass(frozen=True)
class Services:
    appointments: AppointmentService
    contacts: ContactService
    tasks: TaskService
    normalize_phone: Callable[[str | None], str | None]


def _policy(env: Mapping[str, str], key: str, default: DeletePolicy) -> DeletePolicy:
    raw = env.get(key, "").strip().lower()
    if not raw:
        return default
    try:
        return DeletePolicy(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in DeletePolicy)
        raise ConfigurationError(f"{key} must be one of {allowed}, got {raw!r}") from None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from env (default: os.environ after reading ./.env if present)."""
    if env is None:
        dotenv_path = Path.cwd() / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path)
        env = os.environ

    log_level = env.get("ROSTER_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"ROSTER_LOG_LEVEL is not a logging level: {log_level!r}")

    region = env.get("ROSTER_PHONE_REGION", "US").strip().upper() or "US"

    return Settings(
        log_level=log_level,
        appointment_delete_policy=_policy(
            env, "ROSTER_APPOINTMENT_DELETE_POLICY", DeletePolicy.STRICT
        ),
        contact_delete_policy=_policy(env, "ROSTER_CONTACT_DELETE_POLICY", DeletePolicy.LENIENT),
        task_delete_policy=_policy(env, "ROSTER_TASK_DELETE_POLICY", DeletePolicy.LENIENT),
        phone_region=region,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
    logging.getLogger("roster").setLevel(settings.log_level)


def build_services(settings: Settings | None = None) -> Services:
    """Create one empty registry per domain, each with its own store.

    ``normalize_phone`` turns caller input into a ``Contact.phone`` value using
    the configured region.
    """
    settings = settings or Settings()
    logger.info(
        "Delete policies: appointments=%s contacts=%s tasks=%s",
        settings.appointment_delete_policy.value,
        settings.contact_delete_policy.value,
        settings.task_delete_policy.value,
    )
    return Services(
        appointments=AppointmentService(
            InMemoryRecordStore(), policy=settings.appointment_delete_policy
        ),
        contacts=ContactService(InMemoryRecordStore(), policy=settings.contact_delete_policy),
        tasks=TaskService(InMemoryRecordStore(), policy=settings.task_delete_policy),
        normalize_phone=functools.partial(to_contact_phone, region=settings.phone_region),
    )

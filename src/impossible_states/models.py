"""Domain models expressed as sum types.

Each model replaces a bundle of independently nullable fields with a closed
family of variants that carry exactly the data their case needs, so the
all-empty, all-set and half-set combinations cannot be constructed.
"""

import logging
import os
from dataclasses import dataclass
from typing import Union

from .dispatch import Dispatcher, unreachable
from .exceptions import InvalidVariantError

logger = logging.getLogger(__name__)


# Image locations


@dataclass(frozen=True)
class UrlLocator:
    """An image addressed by a full URL."""

    url: str

    @property
    def real_url(self) -> str:
        return real_url(self)


@dataclass(frozen=True)
class S3Locator:
    """An image stored under a key in an S3 bucket.

    Attributes:
        DEFAULT_S3_HOST: Host prefix used when IMAGE_S3_HOST is not set
    """

    bucket: str
    key: str

    DEFAULT_S3_HOST = "pinterest.s3"

    # Environment variable name for the host prefix
    S3_HOST_ENV_VAR = "IMAGE_S3_HOST"

    @classmethod
    def s3_host(cls) -> str:
        """Return the configured S3 host prefix."""
        host = os.environ.get(cls.S3_HOST_ENV_VAR)
        if host:
            logger.debug(f"Using S3 host from {cls.S3_HOST_ENV_VAR}: {host}")
            return host
        return cls.DEFAULT_S3_HOST

    @property
    def real_url(self) -> str:
        return real_url(self)


ImageLocator = Union[UrlLocator, S3Locator]

IMAGE_LOCATOR_VARIANTS = (UrlLocator, S3Locator)


def real_url(locator: ImageLocator) -> str:
    """Resolve a locator to the URL the image can be fetched from."""
    if isinstance(locator, UrlLocator):
        return locator.url
    elif isinstance(locator, S3Locator):
        return f"http://{S3Locator.s3_host()}.{locator.bucket}.{locator.key}"
    unreachable(locator, IMAGE_LOCATOR_VARIANTS)


# Barcodes


@dataclass(frozen=True)
class QrCode:
    code: str


@dataclass(frozen=True)
class UpcCode:
    number_system: int
    manufacturer: int
    product: int
    check: int


Barcode = Union[QrCode, UpcCode]

BARCODE_VARIANTS = (QrCode, UpcCode)

describe_barcode = Dispatcher(
    BARCODE_VARIANTS,
    {
        QrCode: lambda qr: f"QR: {qr.code}",
        UpcCode: lambda upc: (
            f"UPC: {upc.number_system}-{upc.manufacturer}-{upc.product}-{upc.check}"
        ),
    },
)


# Login state


@dataclass(frozen=True)
class User:
    name: str


@dataclass(frozen=True)
class LoggedOut:
    """No user is logged in."""

    @property
    def display_name(self) -> str:
        return display_name(self)


@dataclass(frozen=True)
class LoggedIn:
    """A user is logged in."""

    user: User

    @property
    def display_name(self) -> str:
        return display_name(self)


UserState = Union[LoggedOut, LoggedIn]

USER_STATE_VARIANTS = (LoggedOut, LoggedIn)

LOGGED_OUT_NAME = "Logged out"


def display_name(state: UserState) -> str:
    """Return the logged-in user's name, or "Logged out"."""
    if isinstance(state, LoggedIn):
        return state.user.name
    elif isinstance(state, LoggedOut):
        return LOGGED_OUT_NAME
    unreachable(state, USER_STATE_VARIANTS)


# Network results


def _is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def _is_failure_status(status_code: int) -> bool:
    return 400 <= status_code < 600


@dataclass(frozen=True)
class Success:
    """The backend answered with a 2xx status and a body."""

    body: str
    status_code: int = 200

    def __post_init__(self):
        if not _is_success_status(self.status_code):
            raise InvalidVariantError(
                "Success requires a 2xx status code",
                variant=self,
                status_code=self.status_code,
            )


@dataclass(frozen=True)
class BackendFailure:
    """The backend answered with a 4xx/5xx status and an error message."""

    message: str
    status_code: int = 503

    def __post_init__(self):
        if not _is_failure_status(self.status_code):
            raise InvalidVariantError(
                "BackendFailure requires a 4xx or 5xx status code",
                variant=self,
                status_code=self.status_code,
            )


@dataclass(frozen=True)
class AirplaneMode:
    """The request never left the device."""


NetworkResult = Union[Success, BackendFailure, AirplaneMode]

NETWORK_RESULT_VARIANTS = (Success, BackendFailure, AirplaneMode)

debug_string = Dispatcher(
    NETWORK_RESULT_VARIANTS,
    {
        Success: lambda r: f"Success ({r.status_code}): {r.body}",
        BackendFailure: lambda r: f"Failure ({r.status_code}): {r.message}",
        AirplaneMode: lambda r: "Failure: airplane mode is on",
    },
)


def classify_response(status_code: int, text: str) -> NetworkResult:
    """Turn a raw status code and payload into a NetworkResult."""
    if _is_success_status(status_code):
        return Success(text, status_code)
    if _is_failure_status(status_code):
        return BackendFailure(text, status_code)
    raise InvalidVariantError(
        f"Status code {status_code} is neither a success nor a failure",
        status_code=status_code,
    )

"""
Synthetic test data for the registration suite.

Every generator returns a fresh record built from Faker's shared random
source, so seeding Faker (see :func:`seed`) makes a whole run replayable.
Nothing here touches the browser or the remote site.
"""

from __future__ import annotations

import logging
import re
import string
import uuid
from dataclasses import asdict, dataclass

from faker import Faker

logger = logging.getLogger(__name__)

fake = Faker()


# -----------------------------------------------------------------------------
# Constraints
# -----------------------------------------------------------------------------

class PasswordPolicy:
    """Password rules enforced by the registration form."""

    MIN_LENGTH = 4
    MAX_LENGTH = 12
    DEFAULT_LENGTH = 7


USERNAME_MAX_LENGTH = 15
USERNAME_BASE_LENGTH = 7

# Regeneration bound for generate_valid_password; never reached in practice.
MAX_PASSWORD_ATTEMPTS = 20

ALPHANUMERIC = string.ascii_letters + string.digits

AUSTRALIAN_STATES = [
    "New South Wales",
    "Victoria",
    "Queensland",
    "Western Australia",
    "South Australia",
    "Tasmania",
    "Northern Territory",
    "Australian Capital Territory",
]

AUSTRALIAN_CITIES = [
    "Sydney",
    "Melbourne",
    "Brisbane",
    "Perth",
    "Adelaide",
    "Gold Coast",
    "Newcastle",
    "Canberra",
]


def is_valid_password(value: str) -> bool:
    """Return True when value satisfies every PasswordPolicy rule."""
    return (
        PasswordPolicy.MIN_LENGTH <= len(value) <= PasswordPolicy.MAX_LENGTH
        and any(char in string.ascii_lowercase for char in value)
        and any(char in string.ascii_uppercase for char in value)
        and any(char in string.digits for char in value)
    )


# -----------------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class UserData:
    """Core account fields of the registration form."""

    username: str
    email: str
    password: str
    confirm_password: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class RegistrationData:
    """Every field of the registration form."""

    username: str
    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str
    phone_number: str
    country: str
    city: str
    address: str
    state: str
    postal_code: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class InvalidUserData:
    """Known-bad field values for boundary testing."""

    invalid_email: str
    empty_username: str = ""
    empty_email: str = ""
    empty_password: str = ""
    short_password: str = "123"
    long_password: str = "ThisPasswordIsTooLongForTheValidationRules"
    password_without_numbers: str = "NoNumbers"
    password_without_uppercase: str = "nouppercase123"
    password_without_lowercase: str = "NOLOWERCASE123"


# -----------------------------------------------------------------------------
# Generators
# -----------------------------------------------------------------------------

def seed(value: int) -> None:
    """Seed the shared Faker random source for a reproducible run."""
    Faker.seed(value)
    logger.info(f"Test data seeded with {value}")


def _random_chars(pool: str, count: int) -> list[str]:
    return [fake.random.choice(pool) for _ in range(count)]


def generate_unique_username() -> str:
    """
    Generate a username that is unlikely to exist on the remote site.

    A short lowercase alphanumeric base from Faker is followed by random
    hex, and the result is cut to the site's 15 character limit.

    Returns:
        Non-empty username of at most 15 characters.
    """
    base = re.sub(r"[^a-z0-9]", "", fake.user_name().lower())[:USERNAME_BASE_LENGTH]
    suffix = uuid.uuid4().hex
    return f"{base or 'user'}{suffix}"[:USERNAME_MAX_LENGTH]


def generate_valid_password(length: int = PasswordPolicy.DEFAULT_LENGTH) -> str:
    """
    Generate a password that satisfies PasswordPolicy.

    Required characters are drawn first (one lowercase, one uppercase and
    one digit, plus a second lowercase and a second digit when the length
    allows), the rest is alphanumeric filler, and the result is shuffled.

    Args:
        length: Password length, between 4 and 12.

    Returns:
        Password of exactly ``length`` characters.

    Raises:
        ValueError: If length is outside the policy bounds.
        RuntimeError: If no valid password was produced.
    """
    if not PasswordPolicy.MIN_LENGTH <= length <= PasswordPolicy.MAX_LENGTH:
        raise ValueError(
            f"Password length must be between {PasswordPolicy.MIN_LENGTH} "
            f"and {PasswordPolicy.MAX_LENGTH}, got {length}"
        )

    for _ in range(MAX_PASSWORD_ATTEMPTS):
        chars = (
            _random_chars(string.ascii_lowercase, 1)
            + _random_chars(string.ascii_uppercase, 1)
            + _random_chars(string.digits, 1)
        )
        if length >= 5:
            chars += _random_chars(string.digits, 1)
        if length >= 6:
            chars += _random_chars(string.ascii_lowercase, 1)
        chars += _random_chars(ALPHANUMERIC, length - len(chars))

        fake.random.shuffle(chars)
        password = "".join(chars)
        if is_valid_password(password):
            return password

    raise RuntimeError(f"Could not generate a valid password of length {length}")


def generate_valid_user_data() -> UserData:
    """Generate account fields with matching passwords."""
    password = generate_valid_password()
    return UserData(
        username=generate_unique_username(),
        email=fake.email(),
        password=password,
        confirm_password=password,
    )


def generate_user_data_with_mismatched_passwords() -> UserData:
    """
    Generate account fields whose password and confirmation differ.

    Both values are valid passwords on their own; the confirmation is
    redrawn until it is not equal to the password.
    """
    password = generate_valid_password()
    confirm_password = generate_valid_password()
    while confirm_password == password:
        confirm_password = generate_valid_password()

    return UserData(
        username=generate_unique_username(),
        email=fake.email(),
        password=password,
        confirm_password=confirm_password,
    )


def generate_registration_data(country: str = "Australia") -> RegistrationData:
    """
    Generate a complete registration record with Faker location data.

    Args:
        country: Label of the country option to select.
    """
    password = generate_valid_password()
    return RegistrationData(
        username=generate_unique_username(),
        email=fake.email(),
        password=password,
        confirm_password=password,
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        phone_number=fake.phone_number(),
        country=country,
        city=fake.city(),
        address=fake.street_address(),
        state=fake.state(),
        postal_code=fake.postcode(),
    )


def generate_australian_registration_data() -> RegistrationData:
    """Generate a complete registration record with an Australian address."""
    password = generate_valid_password()
    return RegistrationData(
        username=generate_unique_username(),
        email=fake.email(),
        password=password,
        confirm_password=password,
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        phone_number=fake.numerify("+61 # #### ####"),
        country="Australia",
        city=fake.random_element(AUSTRALIAN_CITIES),
        address=f"{fake.building_number()} {fake.street_name()}",
        state=fake.random_element(AUSTRALIAN_STATES),
        postal_code=fake.numerify("####"),
    )


def generate_invalid_data() -> InvalidUserData:
    """Return the catalog of known-bad values."""
    return InvalidUserData(invalid_email="invalid-email")


def generate_invalid_user_data() -> InvalidUserData:
    """Return the catalog of known-bad values used by the field validation tests."""
    return InvalidUserData(invalid_email="invalid-email-format")

"""
Module Validators - Form checks run before any remote call.

All functions are pure: they return a mapping of field -> message, empty when
the input is valid.
"""

from __future__ import annotations

import math

from .models import Duration

__all__ = [
    "MAX_DUREE",
    "MAX_NOM_LENGTH",
    "MIN_NOM_LENGTH",
    "Messages",
    "parse_duree",
    "validate_create",
    "validate_duree",
    "validate_nom",
    "validate_update",
]

MIN_NOM_LENGTH = 3
MAX_NOM_LENGTH = 100
MAX_DUREE = 1000


class Messages:
    """User-facing validation messages."""

    NOM_REQUIRED = "Le nom du module est requis"
    NOM_TOO_SHORT = f"Le nom doit contenir au moins {MIN_NOM_LENGTH} caractères"
    NOM_TOO_LONG = f"Le nom ne peut pas dépasser {MAX_NOM_LENGTH} caractères"
    DUREE_REQUIRED = "La durée est requise"
    DUREE_NOT_POSITIVE = "La durée doit être un nombre positif"
    DUREE_TOO_LONG = f"La durée ne peut pas dépasser {MAX_DUREE} heures"
    NOTHING_TO_UPDATE = "Aucune modification fournie"


def parse_duree(value: str | int | float | None) -> Duration | None:
    """
    Parse a duration typed in a form.

    Returns:
        int for integral values, float otherwise, None if not a number
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, int):
        return value
    else:
        try:
            number = float(value)
        except (OverflowError, TypeError, ValueError):
            return None

    if math.isnan(number):
        return None
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def validate_nom(nom: str | None) -> str | None:
    """Return the error message for a module name, or None."""
    if not isinstance(nom, str):
        return Messages.NOM_REQUIRED
    trimmed = nom.strip()
    if not trimmed:
        return Messages.NOM_REQUIRED
    if len(trimmed) < MIN_NOM_LENGTH:
        return Messages.NOM_TOO_SHORT
    if len(trimmed) > MAX_NOM_LENGTH:
        return Messages.NOM_TOO_LONG
    return None


def validate_duree(duree: str | int | float | None) -> str | None:
    """Return the error message for a duration, or None."""
    if duree is None or (isinstance(duree, str) and not duree.strip()):
        return Messages.DUREE_REQUIRED

    number = parse_duree(duree)
    if number is None or number <= 0:
        return Messages.DUREE_NOT_POSITIVE
    if number > MAX_DUREE:
        return Messages.DUREE_TOO_LONG
    return None


def validate_create(
    nom: str | None,
    duree: str | int | float | None,
) -> dict[str, str]:
    """
    Check a new module before submission.

    Example:
        >>> validate_create("AB", "10")
        {'nom': 'Le nom doit contenir au moins 3 caractères'}
    """
    errors: dict[str, str] = {}

    nom_error = validate_nom(nom)
    if nom_error:
        errors["nom"] = nom_error

    duree_error = validate_duree(duree)
    if duree_error:
        errors["duree"] = duree_error

    return errors


def validate_update(
    nom: str | None = None,
    duree: str | int | float | None = None,
) -> dict[str, str]:
    """Check the fields given for a partial update. Omitted fields are skipped."""
    if nom is None and duree is None:
        return {"__all__": Messages.NOTHING_TO_UPDATE}

    errors: dict[str, str] = {}
    if nom is not None:
        nom_error = validate_nom(nom)
        if nom_error:
            errors["nom"] = nom_error
    if duree is not None:
        duree_error = validate_duree(duree)
        if duree_error:
            errors["duree"] = duree_error
    return errors

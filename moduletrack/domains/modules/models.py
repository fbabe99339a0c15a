"""
Module Models - Data types for the modules domain.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Hours; integral values stay int
Duration = Union[int, float]


class Module(BaseModel):
    """Training module as stored by the remote API."""

    id: str
    nom: str
    duree: Duration

    model_config = ConfigDict(frozen=True, extra="ignore")


class ModuleCreate(BaseModel):
    """Body of a create request."""

    nom: str
    duree: Duration


class ModuleUpdate(BaseModel):
    """Partial body of an update request."""

    nom: str | None = None
    duree: Duration | None = None


class ModuleState(BaseModel):
    """Snapshot of the cached collection."""

    modules: tuple[Module, ...] = ()
    loading: bool = False
    error: str | None = None

    model_config = ConfigDict(frozen=True)


class ModuleStats(BaseModel):
    """Aggregates over the cached collection."""

    total_modules: int = 0
    total_hours: Duration = 0
    average_hours: int = 0
    longest_module: Duration = 0


class SortKey(str, Enum):
    """Fields a module list can be sorted by."""

    NOM = "nom"
    DUREE = "duree"
    ID = "id"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


# --- Actions ---


class SetLoading(BaseModel):
    """A fetch started or finished."""

    kind: Literal["SET_LOADING"] = "SET_LOADING"
    value: bool

    model_config = ConfigDict(frozen=True)


class SetModules(BaseModel):
    """Replace the whole collection with a fresh server listing."""

    kind: Literal["SET_MODULES"] = "SET_MODULES"
    modules: tuple[Module, ...]

    model_config = ConfigDict(frozen=True)


class AddModule(BaseModel):
    """Append a newly created module."""

    kind: Literal["ADD_MODULE"] = "ADD_MODULE"
    module: Module

    model_config = ConfigDict(frozen=True)


class UpdateModule(BaseModel):
    """Replace the cached copy of a module."""

    kind: Literal["UPDATE_MODULE"] = "UPDATE_MODULE"
    module: Module

    model_config = ConfigDict(frozen=True)


class DeleteModule(BaseModel):
    """Drop a module from the cache."""

    kind: Literal["DELETE_MODULE"] = "DELETE_MODULE"
    id: str

    model_config = ConfigDict(frozen=True)


class SetError(BaseModel):
    """Record (or clear) the last remote failure."""

    kind: Literal["SET_ERROR"] = "SET_ERROR"
    message: str | None

    model_config = ConfigDict(frozen=True)


ModuleAction = Annotated[
    Union[SetLoading, SetModules, AddModule, UpdateModule, DeleteModule, SetError],
    Field(discriminator="kind"),
]

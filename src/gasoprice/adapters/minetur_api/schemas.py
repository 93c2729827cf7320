"""Pydantic schemas for Ministry API response bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gasoprice.adapters.minetur_api.constants import STATION_ALIASES


def _station_alias(field_name: str) -> str:
    return STATION_ALIASES[field_name]


class StationPayload(BaseModel):
    """One entry of ListaEESSPrecio. Unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=_station_alias,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    name: str
    address: str
    hours: str
    lat: str
    lon: str
    diesel_a: str = ""
    diesel_plus: str = ""
    gas95: str = ""
    gas98: str = ""
    biodiesel: str = ""
    bioethanol: str = ""
    cng: str = ""
    lng: str = ""
    lpg: str = ""
    h2: str = ""

    @field_validator(
        "diesel_a",
        "diesel_plus",
        "gas95",
        "gas98",
        "biodiesel",
        "bioethanol",
        "cng",
        "lng",
        "lpg",
        "h2",
        mode="before",
    )
    @classmethod
    def null_price_is_empty(cls, v: Any) -> Any:
        """The API sometimes sends null instead of an empty price."""
        return "" if v is None else v


class StationListPayload(BaseModel):
    """Station-list response: {"ListaEESSPrecio": [...]}."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    stations: list[StationPayload] = Field(alias="ListaEESSPrecio")


class ProvincePayload(BaseModel):
    """Entry of /Listados/Provincias/. The API spells the id key "IDPovincia"."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(alias="IDPovincia")
    name: str = Field(alias="Provincia")


class MunicipalityPayload(BaseModel):
    """Entry of /Listados/MunicipiosPorProvincia/{id}."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(alias="IDMunicipio")
    name: str = Field(alias="Municipio")
    province_id: str | None = Field(default=None, alias="IDProvincia")

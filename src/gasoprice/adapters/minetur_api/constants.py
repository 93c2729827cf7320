"""Constants for the Ministry fuel price API adapter.

Uses the public REST service of the Spanish Ministry for the Ecological
Transition ("Precios Carburantes"). No authentication required.
API Documentation: https://sedeaplicaciones.minetur.gob.es/ServiciosRESTCarburantes/PreciosCarburantes/help
"""

# Endpoint paths, appended to the configured base URL
STATIONS_PATH = "/EstacionesTerrestres/"
STATIONS_BY_MUNICIPALITY_PATH = "/EstacionesTerrestres/FiltroMunicipio/{municipality_id}"
PROVINCES_PATH = "/Listados/Provincias/"
MUNICIPALITIES_PATH = "/Listados/MunicipiosPorProvincia/{province_id}"

# Served by the optional intermediary caching endpoint
AGGREGATOR_STATIONS_PATH = "/fuel_stations"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Key of the station array in station-list responses
STATION_LIST_KEY = "ListaEESSPrecio"

# API field name -> StationRecord attribute. Fixed table, never inferred.
STATION_FIELD_MAP = {
    "Rótulo": "name",
    "Dirección": "address",
    "Precio Gasoleo A": "diesel_a",
    "Precio Gasoleo Premium": "diesel_plus",
    "Precio Gasolina 95 E5": "gas95",
    "Precio Gasolina 98 E5": "gas98",
    "Precio Biodiesel": "biodiesel",
    "Precio Bioetanol": "bioethanol",
    "Precio Gas Natural Comprimido": "cng",
    "Precio Gas Natural Licuado": "lng",
    "Precio Gases licuados del petróleo": "lpg",
    "Precio Hidrogeno": "h2",
    "Horario": "hours",
    "Latitud": "lat",
    "Longitud (WGS84)": "lon",
}

# StationRecord attribute -> API field name
STATION_ALIASES = {attribute: api_key for api_key, attribute in STATION_FIELD_MAP.items()}

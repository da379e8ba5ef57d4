from .catalog import DepartamentoOut, MarcaOut, SubCategoriaConMarcaOut, SubCategoriaOut
from .common import Envelope, ErrorDetail, ErrorResponse, PaginatedEnvelope
from .count import DetalleConteoOut, ProgramacionConteoOut, UbicacionOut
from .health import HealthResponse
from .item import ArticuloCreate, ArticuloOut
from .warehouse import AlmacenOut, SucursalOut

__all__ = [
    # common
    "Envelope",
    "PaginatedEnvelope",
    "ErrorDetail",
    "ErrorResponse",
    # health
    "HealthResponse",
    # catalog
    "MarcaOut",
    "DepartamentoOut",
    "SubCategoriaOut",
    "SubCategoriaConMarcaOut",
    # warehouse
    "SucursalOut",
    "AlmacenOut",
    # item
    "ArticuloCreate",
    "ArticuloOut",
    # count
    "UbicacionOut",
    "DetalleConteoOut",
    "ProgramacionConteoOut",
]

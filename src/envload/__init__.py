"""Typed configuration loading from environment-style key/value sources."""

from envload.bindings import AttrDestination, Binding, Destination, Kind, Slot, attr
from envload.errors import DecodeError, EnvLoadError, LoadError
from envload.loader import Loader, from_dotenv, from_map, from_yaml, new
from envload.sources import EnvironSource, MapSource, PrefixSource, Source

__all__ = [
    "AttrDestination",
    "Binding",
    "DecodeError",
    "Destination",
    "EnvLoadError",
    "EnvironSource",
    "Kind",
    "LoadError",
    "Loader",
    "MapSource",
    "PrefixSource",
    "Slot",
    "Source",
    "attr",
    "from_dotenv",
    "from_map",
    "from_yaml",
    "new",
]

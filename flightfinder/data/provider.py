"""
Read-only airport data provider.

The provider is built once when the application starts and handed to the
Flask app; request handlers only ever read from it.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from pydantic import ValidationError

from flightfinder.data.sample_data import SAMPLE_AIRPORTS
from flightfinder.models import AirportModel

logger = logging.getLogger(__name__)


class AirportDataError(ValueError):
    """Raised when the airport table cannot be built."""


class AirportProvider:
    """Fixed, ordered collection of airport records."""

    def __init__(self, airports: Iterable[AirportModel]):
        """
        Build the provider from an iterable of airport records.

        Args:
            airports: Airport records in the order they should be served

        Raises:
            AirportDataError: If the collection is empty or has duplicate codes
        """
        records = tuple(airports)
        if not records:
            raise AirportDataError("Airport collection must not be empty")

        seen = set()
        for airport in records:
            if airport.code in seen:
                raise AirportDataError(f"Duplicate airport code: {airport.code}")
            seen.add(airport.code)

        self._airports: Tuple[AirportModel, ...] = records
        self._by_code = {airport.code: airport for airport in records}

    @classmethod
    def default(cls) -> "AirportProvider":
        """Provider backed by the built-in airport table."""
        return cls(SAMPLE_AIRPORTS)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AirportProvider":
        """
        Load the airport table from a JSON file holding a list of objects.

        Args:
            path: Path to the JSON file

        Returns:
            AirportProvider: Provider holding the file's records in file order

        Raises:
            AirportDataError: If the file is missing, unreadable or invalid
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise AirportDataError(f"Could not read airport data from {path}: {e}") from e

        if not isinstance(raw, list):
            raise AirportDataError(f"Airport data in {path} must be a JSON list")

        try:
            airports = [AirportModel.model_validate(item) for item in raw]
        except ValidationError as e:
            raise AirportDataError(f"Invalid airport record in {path}: {e}") from e

        logger.info(f"Loaded {len(airports)} airports from {path}")
        return cls(airports)

    def list(self) -> Tuple[AirportModel, ...]:
        """Return every airport in serving order."""
        return self._airports

    def get(self, code: str) -> Optional[AirportModel]:
        """Look up an airport by its IATA code, ignoring case."""
        return self._by_code.get(code.strip().upper())

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[AirportModel]:
        return iter(self._airports)

    def __repr__(self) -> str:
        return f"AirportProvider(airports={len(self._airports)})"

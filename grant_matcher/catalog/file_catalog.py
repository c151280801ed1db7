"""File-backed catalog provider (JSON or YAML)."""

import json
import logging
from pathlib import Path
from typing import List, Union

import yaml

from ..models import GrantProgram
from .base import BaseCatalogProvider, CatalogError, normalize_programs, unwrap_records

logger = logging.getLogger(__name__)


class FileCatalogProvider(BaseCatalogProvider):
    """Loads programs from a JSON or YAML file.

    The file holds either a list of program objects or an object with the
    list under "programs" or "data". camelCase keys are accepted.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def source_name(self) -> str:
        return "file"

    async def fetch_programs(self) -> List[GrantProgram]:
        if not self.path.exists():
            raise CatalogError(f"Catalog file not found: {self.path}")

        logger.info(f"Reading catalog from {self.path}")
        with open(self.path, 'r', encoding='utf-8') as f:
            if self.path.suffix == '.json':
                payload = json.load(f)
            elif self.path.suffix in ['.yaml', '.yml']:
                payload = yaml.safe_load(f)
            else:
                raise CatalogError(
                    f"Unsupported catalog format: {self.path.suffix}. Use .json, .yaml, or .yml"
                )

        records = unwrap_records(payload, self.source_name)
        return normalize_programs(records, self.source_name)

"""Profile reader for loading pricing settings and job costs from files.

The settings store exports its data as JSON documents. This module loads
those documents into the estimating models:

Pricing profile (``read_profile``):
```
{
  "overhead": {"allocation_method": "per-billable-hour",
               "fixed_categories": [{"name": "Yard lease", "amount": 8500}],
               "expected_billable_hours_per_period": 160,
               "utilization_percent": 100},
  "pricing_strategy": {"mode": "markup", "markup_labor_percent": 35},
  "tax_rules": {"enabled": true, "tax_rate_percent": 13},
  "total_rounding": "nearest_1",
  "crew": [{"name": "Sam", "employment_type": "hourly", "base_rate": 32}]
}
```

Cost breakdowns (``read_costs``): a single object or a list of objects with
materials, labor_hours, labor_cost_raw, subs, equipment and logistics. A
``.csv`` file with those column headers (one estimate per row, as exported
from the quoting sheet) is accepted too.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import pandas as pd
from pydantic import ValidationError

from estimator.models.base import BaseDataModel
from estimator.models.costs import CostBreakdown
from estimator.models.financial_brain import FinancialBrain
from estimator.models.labor import LaborSettings
from estimator.models.profile import PricingProfile
from estimator.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseDataModel)


def _not_utf8(error: UnicodeDecodeError) -> str:
    return f"file is not valid UTF-8 (byte at offset {error.start})"


class ProfileReadError(Exception):
    """Raised when a settings or costs file cannot be read or validated.

    Attributes:
        path: File that failed to load
        message: Description of the failure
    """

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class ProfileReader:
    """Reader for pricing profiles, cost breakdowns and Financial Brain settings.

    Numbers are parsed as Decimal straight from the JSON text so that amounts
    such as 0.1 are not distorted by float conversion.

    Example:
        >>> reader = ProfileReader()
        >>> profile = reader.read_profile("profile.json")
        >>> costs = reader.read_costs("costs.json")
    """

    def _load_json(self, path: Union[str, Path]) -> Any:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProfileReadError(path, f"cannot read file: {e.strerror or e}")
        except UnicodeDecodeError as e:
            raise ProfileReadError(path, _not_utf8(e))

        try:
            return json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise ProfileReadError(
                path, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
            )

    def _load_csv_records(self, path: Union[str, Path]) -> List[Dict[str, str]]:
        """Read a CSV sheet into one record per non-empty row.

        Cells are read as text so amounts keep their exact decimal value.
        Blank cells are left out and fall back to the model defaults.
        """
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except OSError as e:
            raise ProfileReadError(path, f"cannot read file: {e.strerror or e}")
        except UnicodeDecodeError as e:
            raise ProfileReadError(path, _not_utf8(e))
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise ProfileReadError(path, f"invalid CSV: {e}")

        records = []
        for _, row in df.iterrows():
            record = {
                str(column).strip(): str(value).strip()
                for column, value in row.to_dict().items()
                if str(value).strip()
            }
            # Skip empty rows
            if record:
                records.append(record)
        return records

    def _validate(
        self, path: Union[str, Path], model: Type[ModelT], data: Any
    ) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ProfileReadError(path, f"invalid {model.__name__}: {errors}")

    @log_function_call
    def read_profile(
        self,
        path: Union[str, Path],
        labor_defaults: Optional[LaborSettings] = None,
    ) -> PricingProfile:
        """Load a pricing profile.

        Args:
            path: Path to the JSON document
            labor_defaults: Labor settings to use when the document has no
                "labor" section

        Returns:
            PricingProfile

        Raises:
            ProfileReadError: If the file is missing, not JSON, or invalid
        """
        data = self._load_json(path)
        if labor_defaults is not None and isinstance(data, dict):
            data.setdefault("labor", labor_defaults.model_dump())
        profile = self._validate(path, PricingProfile, data)
        logger.info(
            "Loaded pricing profile from %s (mode=%s, crew=%d)",
            path,
            profile.pricing_strategy.mode,
            len(profile.crew),
        )
        return profile

    def read_costs(self, path: Union[str, Path]) -> List[CostBreakdown]:
        """Load one or more cost breakdowns.

        Args:
            path: Path to a JSON object or array of objects, or a CSV sheet

        Returns:
            List of CostBreakdown, in file order

        Raises:
            ProfileReadError: If the file is missing, not JSON, or invalid
        """
        if Path(path).suffix.lower() == ".csv":
            records = self._load_csv_records(path)
        else:
            data = self._load_json(path)
            records = data if isinstance(data, list) else [data]

        costs = []
        for index, record in enumerate(records):
            try:
                costs.append(CostBreakdown.model_validate(record))
            except ValidationError as e:
                raise ProfileReadError(
                    path,
                    f"invalid cost breakdown #{index + 1}: "
                    f"{e.error_count()} error(s)",
                )

        logger.info("Loaded %d cost breakdown(s) from %s", len(costs), path)
        return costs

    def read_financial_brain(self, path: Union[str, Path]) -> FinancialBrain:
        """Load Financial Brain settings.

        Raises:
            ProfileReadError: If the file is missing, not JSON, or invalid
        """
        return self._validate(path, FinancialBrain, self._load_json(path))

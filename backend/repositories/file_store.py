"""
File-based implementation of PlanStoreProtocol.
Keeps the whole wedding plan as one pretty-printed JSON document under the
app-data root.
"""

import json
import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from migrations import upgrade_document
from repositories.errors import PlanFormatError, StorageIOError, StoreError
from schemas.plan import WeddingPlan

logger = logging.getLogger(__name__)

DEFAULT_PLAN_FILE = "wedding_plan.json"


class PlanFileStore:
    """Loads and saves the single WeddingPlan document of an installation."""

    def __init__(self, data_dir: Path, filename: str = DEFAULT_PLAN_FILE):
        self.data_dir = Path(data_dir)
        self.path = self.data_dir / filename
        self._lock = threading.Lock()

    def _write(self, data: dict) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Cannot create data dir %s: %s", self.data_dir, e)
            raise StorageIOError(f"Failed to create data directory: {e}") from e

        try:
            payload = json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StoreError(f"Failed to serialize plan: {e}", code="plan_serialization_error") from e

        with self._lock:
            tmp = self.path.with_suffix(".tmp")
            try:
                with open(tmp, "wb") as f:
                    f.write(payload)
                tmp.replace(self.path)
            except OSError as e:
                logger.warning("Plan write failed for %s: %s", self.path, e)
                raise StorageIOError(f"Failed to write plan: {e}") from e
            finally:
                tmp.unlink(missing_ok=True)

    def exists(self) -> bool:
        """True once a plan document has been saved."""
        try:
            return self.path.is_file()
        except OSError:
            return False

    def save(self, plan: WeddingPlan) -> None:
        """Overwrite the document with `plan`. Creates the data dir if needed."""
        self._write(plan.to_document())
        logger.info(
            "Saved plan: %d guests, %d tables, %d todos, %d media",
            len(plan.guests), len(plan.tables), len(plan.todos), len(plan.media),
        )

    def load(self) -> WeddingPlan:
        """
        Read the document back. A missing file yields the all-defaults plan;
        fields missing from an older document take their defaults.

        Raises StorageIOError if the file cannot be read and PlanFormatError if
        it is not a readable plan.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.debug("No plan at %s, returning defaults", self.path)
            return WeddingPlan()
        except json.JSONDecodeError as e:
            raise PlanFormatError(f"Plan file is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise PlanFormatError(f"Plan file is not UTF-8 text: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Failed to read plan: {e}") from e

        if not isinstance(raw, dict):
            raise PlanFormatError(
                f"Plan file must hold a JSON object, found {type(raw).__name__}"
            )

        try:
            return WeddingPlan.model_validate(upgrade_document(raw))
        except ValidationError as e:
            logger.warning("Plan at %s does not match the current schema", self.path)
            raise PlanFormatError(f"Plan file does not match the current schema: {e}") from e

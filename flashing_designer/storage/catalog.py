"""Material catalog and pricing settings storage."""

from __future__ import annotations

import json
import logging
import threading
import uuid
from dataclasses import replace
from pathlib import Path

from ..config import CATALOG_FILENAME
from ..models.material import Material, default_materials, validate_material_values
from ..models.pricing import PricingConfig, default_pricing_config

logger = logging.getLogger(__name__)


class CatalogSaveError(IOError):
    """Raised when saving the material catalog fails."""

    pass


class CatalogLoadError(IOError):
    """Raised when loading the material catalog fails due to I/O errors."""

    pass


class MaterialCatalog:
    """
    Manages materials and pricing settings stored in JSON.

    The catalog is stored in a materials.json file in the data directory's
    resources folder. Every material edit is validated before it is applied,
    so calculations can assume valid material records.

    Schema Version History:
        1.0 - Initial schema with materials and pricing
    """

    FILENAME = CATALOG_FILENAME
    CURRENT_VERSION = '1.0'
    SUPPORTED_VERSIONS = {'1.0'}

    def __init__(self, data_path: str | Path) -> None:
        """
        Initialize the catalog.

        Args:
            data_path: Directory that holds the resources folder
        """
        self._data_path = Path(data_path)
        self._resources_path = self._data_path / 'resources'
        self._catalog_path = self._resources_path / self.FILENAME
        self._materials: list[Material] = []
        self._pricing: PricingConfig = default_pricing_config()
        self._loaded = False
        self._load_lock = threading.Lock()

    @property
    def path(self) -> Path:
        """Location of the catalog file."""
        return self._catalog_path

    @property
    def materials(self) -> list[Material]:
        """Get all materials, loading from disk on first access."""
        self._ensure_loaded()
        return self._materials

    @property
    def pricing(self) -> PricingConfig:
        """Get the stored pricing settings."""
        self._ensure_loaded()
        return self._pricing

    def _ensure_loaded(self) -> None:
        with self._load_lock:
            if not self._loaded:
                self.load()

    def reload(self) -> None:
        """Force reload the catalog from disk."""
        self._loaded = False
        self.load()

    def load(self) -> None:
        """
        Load the catalog from disk.

        If no catalog file exists, creates the default catalog.
        If the file is corrupted (invalid JSON), creates fresh defaults.
        Invalid individual materials are skipped with a warning.

        Raises:
            CatalogLoadError: If the file cannot be read or has the wrong structure
        """
        self._materials = []
        self._pricing = default_pricing_config()

        if not self._catalog_path.exists():
            self._create_default_catalog()
            self.save()
        else:
            try:
                with open(self._catalog_path, encoding='utf-8') as f:
                    data = json.load(f)

                if not isinstance(data, dict):
                    raise CatalogLoadError(
                        "Invalid catalog format: expected JSON object at root"
                    )

                if 'materials' not in data:
                    raise CatalogLoadError(
                        "Invalid catalog format: missing 'materials' key"
                    )

                file_version = data.get('version', '1.0')
                if file_version not in self.SUPPORTED_VERSIONS:
                    raise CatalogLoadError(
                        f"Unsupported catalog schema version: {file_version}. "
                        f"Supported versions: {', '.join(sorted(self.SUPPORTED_VERSIONS))}"
                    )

                materials_list = data['materials']
                if not isinstance(materials_list, list):
                    raise CatalogLoadError(
                        "Invalid catalog format: 'materials' must be a list"
                    )

                for i, material_data in enumerate(materials_list):
                    try:
                        self._materials.append(Material.from_dict(material_data))
                    except (KeyError, TypeError, ValueError) as e:
                        logger.warning("Skipping invalid material at index %d: %s", i, e)

                if 'pricing' in data:
                    try:
                        self._pricing = PricingConfig.from_dict(data['pricing'])
                    except (KeyError, TypeError, ValueError) as e:
                        logger.warning("Invalid pricing settings, using defaults: %s", e)

            except json.JSONDecodeError as e:
                logger.warning("Catalog file is not valid JSON, recreating defaults: %s", e)
                self._create_default_catalog()
                self.save()

            except CatalogLoadError:
                raise

            except OSError as e:
                raise CatalogLoadError(f"Failed to load material catalog: {e}") from e

        self._loaded = True

    def save(self) -> None:
        """
        Save the catalog to disk using atomic write pattern.

        Raises:
            CatalogSaveError: If file cannot be written
        """
        temp_path = self._catalog_path.with_suffix('.tmp')

        try:
            self._resources_path.mkdir(parents=True, exist_ok=True)

            data = {
                'version': self.CURRENT_VERSION,
                'materials': [m.to_dict() for m in self._materials],
                'pricing': self._pricing.to_dict(),
            }

            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)

            temp_path.replace(self._catalog_path)

        except (OSError, TypeError) as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.debug("Could not remove temp file %s", temp_path)

            raise CatalogSaveError(f"Failed to save material catalog: {e}") from e

    def _create_default_catalog(self) -> None:
        """Populate the stock materials and default pricing."""
        self._materials = default_materials()
        self._pricing = default_pricing_config()

    def _generate_id(self) -> str:
        """Generate a unique ID."""
        return str(uuid.uuid4())[:8]

    def get_material(self, material_id: str) -> Material | None:
        """Find a material by ID."""
        for material in self.materials:
            if material.id == material_id:
                return material
        return None

    def add_material(self, material: Material) -> Material:
        """
        Add a material to the catalog.

        A material without an ID is given a generated one.

        Raises:
            ValueError: If a material with the same ID already exists
        """
        if not material.id:
            material.id = self._generate_id()
        if self.get_material(material.id) is not None:
            raise ValueError(f"Material {material.id!r} already exists")
        self._materials.append(material)
        self.save()
        return material

    def update_material(self, material_id: str, name: str | None = None,
                        thickness_inches: float | None = None,
                        k_factor: float | None = None,
                        sheet_price: float | None = None,
                        allowed_widths: list[float] | None = None) -> bool:
        """
        Update an existing material.

        Args:
            material_id: ID of material to update
            name: New display name (optional)
            thickness_inches: New thickness - must be in (0, 0.25] (optional)
            k_factor: New K-factor - must be in (0, 1) (optional)
            sheet_price: New sheet price - must be positive (optional)
            allowed_widths: New strip catalog - must be non-empty (optional)

        Returns:
            True if material was found and updated

        Raises:
            ValueError: If any value is invalid; nothing is changed in that case
            CatalogSaveError: If the catalog cannot be written; the previous
                material is kept in that case
        """
        material = self.get_material(material_id)
        if material is None:
            return False

        validate_material_values(
            thickness_inches=thickness_inches,
            k_factor=k_factor,
            sheet_price=sheet_price,
            allowed_widths=allowed_widths,
        )

        changes: dict[str, object] = {}
        if name is not None:
            changes['name'] = name
        if thickness_inches is not None:
            changes['thickness_inches'] = thickness_inches
        if k_factor is not None:
            changes['k_factor'] = k_factor
        if sheet_price is not None:
            changes['sheet_price'] = sheet_price
        if allowed_widths is not None:
            changes['allowed_widths'] = sorted(allowed_widths)

        index = self._materials.index(material)
        self._materials[index] = replace(material, **changes)
        try:
            self.save()
        except CatalogSaveError:
            self._materials[index] = material
            raise
        return True

    def update_material_price(self, material_id: str, sheet_price: float) -> bool:
        """Update a material's sheet price. Returns True if found."""
        return self.update_material(material_id, sheet_price=sheet_price)

    def delete_material(self, material_id: str) -> bool:
        """
        Delete a material.

        Returns:
            True if material was found and deleted
        """
        for i, material in enumerate(self.materials):
            if material.id == material_id:
                self._materials.pop(i)
                self.save()
                return True
        return False

    def update_pricing(self, pricing: PricingConfig) -> None:
        """Replace the stored pricing settings."""
        self._ensure_loaded()
        self._pricing = pricing
        self.save()
